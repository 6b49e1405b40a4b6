"""Miscellaneous utility functions."""
from __future__ import annotations

from typing import Any


def is_truthy(value: Any) -> bool:
    """
    Check whether a value represents a True boolean value.

    Manifest flags are written as element text, so ``"1"``, ``"true"`` and
    ``"yes"`` are all true while an empty or absent element is false.

    :param value: The value to check
    :rtype: bool
    """
    if value is None:
        return False
    return str(value).strip().lower() not in ("", "n", "no", "off", "f", "false", "0")
