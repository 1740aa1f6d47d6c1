"""Core command model, dispatch, and process runner."""
