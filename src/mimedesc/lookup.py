"""Runtime lookup of MIME type descriptions."""

from typing import Tuple

from mimedesc.data import MIME_DATA


def get(mime_type: str) -> Tuple[str, bool]:
    """
    Return the human-friendly description for a MIME type.

    The match is exact and case-sensitive; no MIME parameters are parsed.
    The second value is False, with an empty description, when the type is
    not in the table.
    """
    description = MIME_DATA.get(mime_type)
    if description is None:
        return "", False
    return description, True
