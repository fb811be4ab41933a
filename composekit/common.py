"""Shared helpers for test set-up."""

from __future__ import annotations

import logging
import os
import threading

_lock = threading.Lock()
_initialized = False


def set_up() -> bool:
    """Configure logging once per process; return True only on the call that did it."""
    global _initialized
    with _lock:
        if _initialized:
            return False
        level = os.environ.get("LOG_LEVEL", "ERROR").upper()
        logging.basicConfig(level=level)
        _initialized = True
        return True


def normalize_test_name(name: object) -> str:
    """Turn a qualified test name into one usable as an identifier."""
    return str(name).replace("::", "__").replace(".", "_")