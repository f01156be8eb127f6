"""
Document identifiers.

Blogs are keyed by ObjectId-shaped strings: 12 bytes rendered as
24 lowercase hex characters, the first 4 bytes a big-endian
seconds timestamp, the remaining 8 random.
"""

import re
import secrets
import time

_OBJECT_ID_RE = re.compile(r"[0-9a-fA-F]{24}")


def new_object_id() -> str:
    """Generate a fresh storage identifier."""
    timestamp = int(time.time()) & 0xFFFFFFFF
    return f"{timestamp:08x}{secrets.token_hex(8)}"


def is_valid_object_id(value: str) -> bool:
    return _OBJECT_ID_RE.fullmatch(value) is not None
