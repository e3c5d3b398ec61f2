"""
Rendering of the description table into a Python module.

The table is rendered through a Jinja2 template into a module declaring a
single read-only mapping, then passed through black. A template that renders
to invalid Python fails formatting, so nothing invalid ever reaches disk.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Mapping, Optional, Union

import black
import jinja2

from mimedesc.constants import DB_URL, GENERATOR_COMMAND
from mimedesc.errors import RenderError
from mimedesc.generation.persist import write_module

logger = logging.getLogger(__name__)


MODULE_TEMPLATE = '''\
# Code generated by {{ command }}; DO NOT EDIT.
# This file was generated on {{ timestamp }}
# Source: {{ source }}
"""MIME type descriptions from the freedesktop.org shared-mime-info database."""

from types import MappingProxyType
from typing import Mapping

# MIME_DATA maps MIME types to their human-friendly descriptions.
MIME_DATA: Mapping[str, str] = MappingProxyType(
    {
{%- for mime, desc in descriptions.items() %}
        "{{ mime | escape_literal }}": "{{ desc | escape_literal }}",
{%- endfor %}
    }
)
'''

# Quotes are left alone so the rendered literals survive formatting verbatim
BLACK_MODE = black.Mode(string_normalization=False)


def escape_description(text: str) -> str:
    """
    Escape text for embedding between double quotes in a string literal.

    Backslashes are doubled and double quotes are backslash-escaped; all
    other characters pass through unchanged.

    Example:
        >>> escape_description('He said "hi"')
        'He said \\\\"hi\\\\"'
    """
    return text.replace("\\", "\\\\").replace('"', '\\"')


def generation_timestamp(now: Optional[datetime] = None) -> str:
    """UTC timestamp in RFC 3339 form, e.g. 2026-10-17T09:12:44Z."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def _environment() -> jinja2.Environment:
    env = jinja2.Environment(
        autoescape=False,
        keep_trailing_newline=True,
        undefined=jinja2.StrictUndefined,
    )
    env.filters["escape_literal"] = escape_description
    return env


def render_module(
    descriptions: Mapping[str, str],
    timestamp: str,
    source: str = DB_URL,
) -> str:
    """
    Render the table module source (unformatted).

    Raises:
        RenderError: If the template fails to render.
    """
    try:
        template = _environment().from_string(MODULE_TEMPLATE)
        return template.render(
            command=GENERATOR_COMMAND,
            timestamp=timestamp,
            source=source,
            descriptions=descriptions,
        )
    except jinja2.TemplateError as exc:
        raise RenderError(f"failed to execute template: {exc}") from exc


def format_module(source_text: str) -> str:
    """
    Format rendered source with black.

    Raises:
        RenderError: If the source is not valid Python.
    """
    try:
        return black.format_str(source_text, mode=BLACK_MODE)
    except black.InvalidInput as exc:
        raise RenderError(f"failed to format generated code: {exc}") from exc


def build_table(
    descriptions: Mapping[str, str],
    output_path: Union[str, Path],
    timestamp: Optional[str] = None,
    source: str = DB_URL,
) -> Path:
    """
    Render, validate and persist the description table.

    Args:
        descriptions: MIME type -> raw description.
        output_path: Destination of the generated module.
        timestamp: Header timestamp. Defaults to the current UTC time.
        source: Database location recorded in the header.

    Returns:
        Path of the written module.

    Raises:
        RenderError: If rendering or formatting fails. Nothing is written.
        WriteError: If the module cannot be persisted.
    """
    timestamp = timestamp or generation_timestamp()
    formatted = format_module(render_module(descriptions, timestamp, source))
    logger.debug(f"Rendered {len(descriptions)} entries ({len(formatted)} chars)")
    return write_module(formatted, Path(output_path))
