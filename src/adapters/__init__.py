"""Adapters package (CLI entry points and user interfaces)."""
