"""Generation of the static MIME description table."""

from .source import (
    fetch_database,
    open_local,
    open_source,
)

from .extract import (
    MimeType,
    ExtractionResult,
    iter_mime_types,
    parse_mime_xml,
    parse_mime_xml_with_result,
)

from .render import (
    MODULE_TEMPLATE,
    escape_description,
    generation_timestamp,
    render_module,
    format_module,
    build_table,
)

from .persist import write_module

__all__ = [
    # Source
    "fetch_database",
    "open_local",
    "open_source",
    # Extraction
    "MimeType",
    "ExtractionResult",
    "iter_mime_types",
    "parse_mime_xml",
    "parse_mime_xml_with_result",
    # Rendering
    "MODULE_TEMPLATE",
    "escape_description",
    "generation_timestamp",
    "render_module",
    "format_module",
    "build_table",
    # Persistence
    "write_module",
]
