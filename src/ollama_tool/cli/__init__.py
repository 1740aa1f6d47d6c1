"""Typer command-line interface for ollama-tool."""
