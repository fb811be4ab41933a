"""Helpers for integration tests: running commands and managing docker compose projects."""

__version__ = "0.1.0"
__all__ = ["cmd", "common", "docker"]