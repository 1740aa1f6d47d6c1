"""Allow ``python -m ollama_tool``."""

from ollama_tool.cli.main import main

if __name__ == "__main__":  # pragma: no cover
    main()
