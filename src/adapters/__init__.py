"""Inbound adapters (CLI and user interfaces)."""
