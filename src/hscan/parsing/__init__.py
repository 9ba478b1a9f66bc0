"""Shared parsing helpers (character classes)."""
