"""Shared helpers: logging setup and id generation."""
