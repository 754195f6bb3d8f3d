"""Player name validation."""

from __future__ import annotations

import re

_SPACE_RUN = re.compile(" +")
MIN_NAME_LENGTH = 3


def verify_name(name):
    """Tidy a typed name and tell whether it is acceptable.

    Runs of spaces become one space and trailing spaces are dropped; a name of
    two characters or fewer is returned untouched. Returns ``(name, valid)``.
    """
    if len(name) <= 2:
        return name, False
    cleaned = _SPACE_RUN.sub(" ", name).rstrip(" ")
    return cleaned, len(cleaned) >= MIN_NAME_LENGTH