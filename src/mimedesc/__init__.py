"""
mimedesc: human-friendly descriptions for MIME types.

The descriptions come from the freedesktop.org shared-mime-info database and
are embedded in mimedesc.data, which is produced by `python -m mimedesc.generate`.

    >>> import mimedesc
    >>> mimedesc.get("application/pdf")
    ('PDF document', True)
"""

from mimedesc.lookup import get

__version__ = "0.1.0"

__all__ = ["get"]
