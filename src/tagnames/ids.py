"""Delimited id parsing utilities."""

import re

# Sequences are stored as signed 64-bit integers downstream.
MAX_SEQUENCE = 2**63 - 1

_SEQUENCE_PATTERN = re.compile(r"0|[1-9][0-9]*")


def split_id(id: str, marker: str) -> tuple[str, int] | None:
    """Split ``<prefix><marker><sequence>`` into ``(prefix, sequence)``.

    Returns None unless the marker occurs exactly once and the suffix is a
    canonical non-negative decimal (no sign, no leading zeros except "0").
    """
    if not marker:
        raise ValueError("marker must not be empty")

    parts = id.split(marker)
    if len(parts) != 2:
        return None

    prefix, suffix = parts
    if not _SEQUENCE_PATTERN.fullmatch(suffix):
        return None

    sequence = int(suffix)
    if sequence > MAX_SEQUENCE:
        return None
    return prefix, sequence


def join_id(prefix: str, marker: str, sequence: int) -> str:
    """Format the parts back into an id. Does not validate."""
    return f"{prefix}{marker}{sequence:d}"
