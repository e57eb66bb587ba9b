"""
JSON encoding for reference documents.

Two renderings:
- `encode_reference_json`: human-readable text written to disk (insertion order
  kept, so exponents stay in numeric order).
- `canonical_json_bytes`: sorted keys, no whitespace; hashed by
  `reference_digest` so two implementations can compare one line instead of a file.

Floats are rejected in both: every reference value is an integer, and a float
slipping in would mean a rounding path leaked.
"""

from __future__ import annotations

import hashlib
import json
from typing import Any


def _require_integer_document(value: Any) -> None:
    """Only str-keyed mappings, lists and ints (never floats) may appear."""
    if isinstance(value, float):
        raise TypeError("reference values must be ints, got a float")
    if isinstance(value, dict):
        if any(not isinstance(k, str) for k in value):
            raise TypeError("reference document keys must be str")
        children = value.values()
    elif isinstance(value, (list, tuple)):
        children = value
    else:
        return
    for child in children:
        _require_integer_document(child)


def canonical_json_bytes(value: Any) -> bytes:
    """One fixed byte string per document: sorted keys, no whitespace, UTF-8."""
    _require_integer_document(value)
    text = json.dumps(
        value,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    )
    return text.encode("utf-8")


def reference_digest(document: Any) -> str:
    """SHA-256 of the canonical encoding, ``0x``-prefixed."""
    return "0x" + hashlib.sha256(canonical_json_bytes(document)).hexdigest()


def encode_reference_json(document: Any, *, indent: int = 2) -> str:
    """Pretty JSON text with a trailing newline."""
    _require_integer_document(document)
    return json.dumps(document, indent=indent, allow_nan=False) + "\n"
