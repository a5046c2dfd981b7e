"""Nuvia: a chat-based AI study assistant."""

__version__ = "0.1.0"
