"""
Helpers shared by the resource endpoints.
"""
from typing import Optional

from spaceship.schemas.utils import MAX_ID


def parse_id(raw: str) -> Optional[int]:
    """
    Parse a path id.

    Returns None for anything that is not an integer in 1..MAX_ID; such an
    id cannot match a row, so callers answer it as not found.
    """
    try:
        value = int(raw.strip())
    except ValueError:
        return None
    if not 1 <= value <= MAX_ID:
        return None
    return value
