"""
Tests for MIME type extraction from shared-mime-info XML.
"""

import io

import pytest

from mimedesc.errors import DecodeError
from mimedesc.generation.extract import (
    MimeType,
    iter_mime_types,
    parse_mime_xml,
    parse_mime_xml_with_result,
)


FREEDESKTOP_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<mime-info xmlns="http://www.freedesktop.org/standards/shared-mime-info">
  <mime-type type="application/pdf">
    <comment>PDF document</comment>
    <comment xml:lang="de">PDF-Dokument</comment>
    <generic-icon name="x-office-document"/>
    <magic priority="50">
      <match type="string" value="%PDF-" offset="0:1024"/>
    </magic>
    <glob pattern="*.pdf"/>
  </mime-type>
  <mime-type type="text/plain">
    <comment>Plain text document</comment>
    <glob pattern="*.txt"/>
  </mime-type>
  <mime-type type="application/x-no-comment">
    <glob pattern="*.nc"/>
  </mime-type>
  <mime-type type="application/x-empty-comment">
    <comment></comment>
  </mime-type>
</mime-info>
"""


def _stream(data: bytes) -> io.BytesIO:
    return io.BytesIO(data)


# =============================================================================
# HAPPY PATH
# =============================================================================

def test_parse_extracts_described_types():
    descriptions = parse_mime_xml(_stream(FREEDESKTOP_XML))

    assert descriptions == {
        "application/pdf": "PDF document",
        "text/plain": "Plain text document",
    }


def test_translated_comments_are_ignored():
    xml = b"""<mime-info>
      <mime-type type="image/png">
        <comment xml:lang="fr">image PNG</comment>
        <comment>PNG image</comment>
        <comment xml:lang="es">imagen PNG</comment>
      </mime-type>
    </mime-info>"""

    assert parse_mime_xml(_stream(xml)) == {"image/png": "PNG image"}


def test_only_translated_comments_means_no_entry():
    xml = b"""<mime-info>
      <mime-type type="image/png"><comment xml:lang="fr">image PNG</comment></mime-type>
    </mime-info>"""

    assert parse_mime_xml(_stream(xml)) == {}


def test_special_characters_are_kept_raw():
    xml = b"""<mime-info>
      <mime-type type="text/x-quote"><comment>He said "hi"\\now &amp; left</comment></mime-type>
    </mime-info>"""

    descriptions = parse_mime_xml(_stream(xml))
    assert descriptions["text/x-quote"] == 'He said "hi"\\now & left'


def test_repeated_untranslated_comment_last_wins():
    xml = b"""<mime-info>
      <mime-type type="a/b"><comment>one</comment><comment>two</comment></mime-type>
      <mime-type type="c/d"><comment>kept</comment></mime-type>
    </mime-info>"""

    assert parse_mime_xml(_stream(xml)) == {"a/b": "two", "c/d": "kept"}


def test_duplicate_types_last_wins():
    xml = b"""<mime-info>
      <mime-type type="text/x-dup"><comment>first</comment></mime-type>
      <mime-type type="text/plain"><comment>plain</comment></mime-type>
      <mime-type type="text/x-dup"><comment>second</comment></mime-type>
    </mime-info>"""

    result = parse_mime_xml_with_result(_stream(xml))
    assert result.descriptions == {"text/x-dup": "second", "text/plain": "plain"}
    assert result.duplicates == 1


def test_duplicate_without_comment_does_not_erase_earlier_entry():
    xml = b"""<mime-info>
      <mime-type type="text/x-dup"><comment>described</comment></mime-type>
      <mime-type type="text/x-dup"><glob pattern="*.dup"/></mime-type>
    </mime-info>"""

    assert parse_mime_xml(_stream(xml)) == {"text/x-dup": "described"}


def test_missing_type_attribute_is_skipped():
    xml = b"""<mime-info>
      <mime-type><comment>orphan</comment></mime-type>
      <mime-type type="text/plain"><comment>plain</comment></mime-type>
    </mime-info>"""

    result = parse_mime_xml_with_result(_stream(xml))
    assert result.descriptions == {"text/plain": "plain"}
    assert result.elements_seen == 2
    assert result.skipped == 1


def test_result_counts():
    result = parse_mime_xml_with_result(_stream(FREEDESKTOP_XML))

    assert result.elements_seen == 4
    assert result.skipped == 2
    assert result.duplicates == 0


def test_iter_mime_types_yields_every_element_in_order():
    entries = list(iter_mime_types(_stream(FREEDESKTOP_XML)))

    assert [e.mime_type for e in entries] == [
        "application/pdf",
        "text/plain",
        "application/x-no-comment",
        "application/x-empty-comment",
    ]
    assert entries[0] == MimeType(mime_type="application/pdf", comment="PDF document")
    assert entries[2].comment == ""


def test_document_without_mime_types_yields_empty_mapping():
    assert parse_mime_xml(_stream(b"<mime-info/>")) == {}


# =============================================================================
# FAILURES
# =============================================================================

@pytest.mark.parametrize("data", [
    b"<mime-info><mime-type type='a'><comment>x</comment></mime-info>",
    b"<mime-info><mime-type type='a'><comment>x</comment></mime-type>",
    b"this is not xml",
])
def test_malformed_xml_raises_decode_error(data):
    with pytest.raises(DecodeError):
        parse_mime_xml(_stream(data))


def test_unresolved_entity_raises_decode_error():
    xml = b"""<?xml version="1.0"?>
    <!DOCTYPE mime-info [<!ENTITY e "foo">]>
    <mime-info>
      <mime-type type="a/b"><comment>A &e; B</comment></mime-type>
    </mime-info>"""

    with pytest.raises(DecodeError, match="a/b"):
        parse_mime_xml(_stream(xml))


def test_failure_after_valid_entries_emits_nothing():
    xml = b"""<mime-info>
      <mime-type type="text/plain"><comment>plain</comment></mime-type>
      <mime-type type="text/x-broken"><comment>broken</mime-type>
    </mime-info>"""

    with pytest.raises(DecodeError):
        parse_mime_xml(_stream(xml))
