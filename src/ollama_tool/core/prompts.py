"""Prompt defaults for generation requests."""

from __future__ import annotations

DEFAULT_SYSTEM_PROMPT = "You are an AI assistant. Respond helpfully."
