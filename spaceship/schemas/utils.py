"""
Utility functions for schema validation.
"""
from typing import Any


def require_text(v: Any) -> str:
    """
    Strip a text field and reject blank values.

    Args:
        v: Incoming value (already coerced to str by pydantic)

    Returns:
        The stripped string

    Raises:
        ValueError: If nothing remains after stripping
    """
    stripped = v.strip()
    if not stripped:
        raise ValueError("must not be blank")
    return stripped


# Largest id a 64-bit INTEGER column can hold
MAX_ID = 2**63 - 1
