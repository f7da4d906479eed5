from __future__ import annotations
import os
import threading

_print_lock = threading.Lock()


def log(msg: str) -> None:
    with _print_lock:
        print(msg, flush=True)


def debug(msg: str) -> None:
    """Log only when SURGEBOX_DEBUG is switched on."""
    if os.environ.get('SURGEBOX_DEBUG', '').strip().lower() in ('1', 'true', 'yes', 'on'):
        log(f"[debug] {msg}")
