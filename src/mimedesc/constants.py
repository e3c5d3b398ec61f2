"""
Shared constants across mimedesc modules.

This module is the single source of truth for:
- Upstream database location
- XML element and attribute names in the shared-mime-info format
- Generated module location and file mode
"""

from pathlib import Path

# =============================================================================
# UPSTREAM DATABASE
# =============================================================================
# Authoritative freedesktop.org shared-mime-info database

DB_URL = (
    "https://gitlab.freedesktop.org/xdg/shared-mime-info/-/raw/master/"
    "data/freedesktop.org.xml.in"
)

# Seconds before an HTTP fetch of the database is abandoned
DEFAULT_TIMEOUT = 60.0

HTTP_SCHEMES = ("http://", "https://")
FILE_SCHEME = "file://"


# =============================================================================
# XML VOCABULARY
# =============================================================================
# Matched by local name, so the freedesktop namespace is irrelevant

MIME_TYPE_TAG = "mime-type"
COMMENT_TAG = "comment"
TYPE_ATTR = "type"
XML_LANG_ATTR = "{http://www.w3.org/XML/1998/namespace}lang"


# =============================================================================
# GENERATED MODULE
# =============================================================================

DEFAULT_OUTPUT_PATH = Path(__file__).resolve().parent / "data.py"
OUTPUT_FILE_MODE = 0o644
GENERATOR_COMMAND = "python -m mimedesc.generate"


# =============================================================================
# ENVIRONMENT
# =============================================================================

ENV_SOURCE = "MIMEDESC_SOURCE"
ENV_OUTPUT = "MIMEDESC_OUTPUT"
ENV_TIMEOUT = "MIMEDESC_TIMEOUT"
