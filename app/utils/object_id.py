# app/utils/object_id.py
"""
Record identifiers: 12 bytes rendered as 24 lowercase hex characters.

Layout: 4-byte big-endian unix timestamp | 5-byte per-process random | 3-byte counter.
Ids generated in one process sort in creation order.
"""

import os
import re
import struct
import threading
import time

OBJECT_ID_RE = re.compile(r"[0-9a-fA-F]{24}")

_PROCESS_RANDOM = os.urandom(5)
_counter = int.from_bytes(os.urandom(3), "big")
_lock = threading.Lock()


def new_object_id() -> str:
    """Generate a fresh identifier."""
    global _counter
    with _lock:
        _counter = (_counter + 1) % 0x1000000
        count = _counter
    raw = struct.pack(">I", int(time.time()) & 0xFFFFFFFF) + _PROCESS_RANDOM + count.to_bytes(3, "big")
    return raw.hex()


def is_valid_object_id(value) -> bool:
    """True when value is a 24-character hex string."""
    return isinstance(value, str) and bool(OBJECT_ID_RE.fullmatch(value))
