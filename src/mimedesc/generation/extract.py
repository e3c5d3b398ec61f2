"""
MIME type extraction from the shared-mime-info XML database.

The database is scanned with lxml's iterparse so the whole document tree is
never held in memory. Each <mime-type> element contributes its `type`
attribute and the text of its untranslated <comment> child.
"""

import logging
from dataclasses import dataclass
from typing import BinaryIO, Dict, Iterator

from lxml import etree

from mimedesc.constants import (
    COMMENT_TAG,
    MIME_TYPE_TAG,
    TYPE_ATTR,
    XML_LANG_ATTR,
)
from mimedesc.errors import DecodeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MimeType:
    """A <mime-type> element reduced to its identifier and description."""
    mime_type: str
    comment: str


@dataclass
class ExtractionResult:
    """Result of scanning the XML database."""
    descriptions: Dict[str, str]
    elements_seen: int
    skipped: int        # missing type or empty comment
    duplicates: int     # earlier entries replaced by a later element


def _local_name(elem) -> str:
    """Tag name without namespace; empty for comments and PIs."""
    if not isinstance(elem.tag, str):
        return ""
    return etree.QName(elem.tag).localname


def _decode_mime_type(elem) -> MimeType:
    """
    Decode a <mime-type> element.

    When several untranslated comments are present, the last one wins.

    Raises:
        DecodeError: If the comment contains an unresolved entity reference.
    """
    comments = [
        child for child in elem
        if _local_name(child) == COMMENT_TAG and child.get(XML_LANG_ATTR) is None
    ]
    mime_type = elem.get(TYPE_ATTR) or ""
    if not comments:
        return MimeType(mime_type=mime_type, comment="")

    comment = comments[-1]
    entity = next(comment.iter(etree.Entity), None)
    if entity is not None:
        raise DecodeError(
            f"error decoding mime-type element {mime_type!r}: "
            f"unresolved entity {entity.text} (line {comment.sourceline})"
        )
    return MimeType(mime_type=mime_type, comment="".join(comment.itertext()))


def iter_mime_types(stream: BinaryIO) -> Iterator[MimeType]:
    """
    Yield every <mime-type> element of the stream in document order.

    Entries are yielded as decoded, including ones with an empty type or
    comment; filtering is left to the caller.

    Raises:
        DecodeError: If the stream is not well-formed XML or a comment
            holds an unresolved entity reference.
    """
    saw_root = False
    try:
        for _, elem in etree.iterparse(
            stream, events=("end",), resolve_entities=False, no_network=True
        ):
            saw_root = True
            if _local_name(elem) != MIME_TYPE_TAG:
                continue

            yield _decode_mime_type(elem)

            # Drop processed siblings so memory stays flat
            elem.clear()
            parent = elem.getparent()
            if parent is not None:
                while elem.getprevious() is not None:
                    del parent[0]
    except etree.XMLSyntaxError as exc:
        raise DecodeError(f"error decoding token: {exc}") from exc

    if not saw_root:
        raise DecodeError("error decoding token: document is empty")


def parse_mime_xml_with_result(stream: BinaryIO) -> ExtractionResult:
    """
    Extract a type -> description mapping plus scan statistics.

    Only entries with a non-empty type and comment are kept. When a type
    appears more than once, the last element in document order wins.
    """
    descriptions: Dict[str, str] = {}
    seen = skipped = duplicates = 0

    for entry in iter_mime_types(stream):
        seen += 1
        if not entry.mime_type:
            logger.warning("Skipping mime-type element without a type attribute")
            skipped += 1
            continue
        if not entry.comment:
            logger.debug(f"Skipping {entry.mime_type}: no comment")
            skipped += 1
            continue
        if entry.mime_type in descriptions:
            logger.debug(f"Duplicate {entry.mime_type}: keeping later comment")
            duplicates += 1
        descriptions[entry.mime_type] = entry.comment

    logger.info(
        f"Scanned {seen} mime-type elements: {len(descriptions)} kept, "
        f"{skipped} skipped, {duplicates} duplicates replaced"
    )
    return ExtractionResult(
        descriptions=descriptions,
        elements_seen=seen,
        skipped=skipped,
        duplicates=duplicates,
    )


def parse_mime_xml(stream: BinaryIO) -> Dict[str, str]:
    """Extract a mapping of MIME types to their descriptions."""
    return parse_mime_xml_with_result(stream).descriptions
