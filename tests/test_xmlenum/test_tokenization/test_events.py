"""Tests for the lxml-backed markup event stream."""

import io

import pytest

from xmlenum.shared import ParseError, ShapeConfig
from xmlenum.tokenization import (
    EventKind,
    MarkupEvent,
    events_from_bytes,
    iter_markup_events,
    local_name,
)


def _pairs(events):
    return [(event.kind, event.name) for event in events]


class TestMarkupEvent:
    """Test MarkupEvent values."""

    def test_start_and_end_flags(self):
        """Test kind helpers."""
        start = MarkupEvent(EventKind.START, "item")
        end = MarkupEvent(EventKind.END, "item")

        assert start.is_start and not start.is_end
        assert end.is_end and not end.is_start

    def test_empty_name_raises_error(self):
        """Test that an empty element name is rejected."""
        with pytest.raises(ValueError, match="Event name cannot be empty"):
            MarkupEvent(EventKind.START, "")


class TestEventStream:
    """Test tokenizing XML into start/end events."""

    def test_nested_elements_in_document_order(self):
        """Test that starts and ends arrive in document order."""
        events = events_from_bytes(b"<catalog><item><name>A</name></item></catalog>")

        assert _pairs(events) == [
            (EventKind.START, "catalog"),
            (EventKind.START, "item"),
            (EventKind.START, "name"),
            (EventKind.END, "name"),
            (EventKind.END, "item"),
            (EventKind.END, "catalog"),
        ]

    def test_text_attributes_comments_and_pis_are_dropped(self):
        """Test that only element starts and ends are reported."""
        xml = (
            b'<?xml version="1.0"?>'
            b"<r a='1'><!-- note --><?pi data?>text<x b='2'>more</x>tail</r>"
        )

        assert _pairs(events_from_bytes(xml)) == [
            (EventKind.START, "r"),
            (EventKind.START, "x"),
            (EventKind.END, "x"),
            (EventKind.END, "r"),
        ]

    def test_namespaces_reduced_to_local_names(self):
        """Test that namespace URIs and prefixes are discarded."""
        xml = b'<r xmlns="urn:a" xmlns:p="urn:p"><p:item/></r>'

        assert [event.name for event in events_from_bytes(xml)] == ["r", "item", "item", "r"]

    def test_names_are_case_sensitive(self):
        """Test that names are passed through unchanged."""
        assert [e.name for e in events_from_bytes(b"<Item><item/></Item>")] == [
            "Item", "item", "item", "Item",
        ]

    def test_local_name(self):
        """Test namespace stripping of lxml tags."""
        assert local_name("{urn:x}item") == "item"
        assert local_name("item") == "item"

    def test_binary_stream_source(self):
        """Test reading from an open binary stream."""
        stream = io.BytesIO(b"<a><b/></a>")

        events = list(iter_markup_events(stream, ShapeConfig(), "stream.xml"))

        assert len(events) == 4

    def test_file_name_source(self, tmp_path):
        """Test reading directly from a file name."""
        path = tmp_path / "doc.xml"
        path.write_bytes(b"<a/>")

        assert _pairs(iter_markup_events(str(path))) == [
            (EventKind.START, "a"),
            (EventKind.END, "a"),
        ]

    def test_malformed_input_raises_parse_error(self):
        """Test that mismatched tags surface as ParseError."""
        with pytest.raises(ParseError) as exc:
            list(events_from_bytes(b"<a><b></a>", path="broken.xml"))

        assert exc.value.path == "broken.xml"
        assert "broken.xml" in str(exc.value)
        assert exc.value.reason

    def test_truncated_input_raises_parse_error(self):
        """Test that a document cut short is an error, not end of input."""
        with pytest.raises(ParseError):
            list(events_from_bytes(b"<a><b>text</b>"))

    def test_file_name_used_as_path_when_not_given(self, tmp_path):
        """Test that diagnostics default to the source file name."""
        path = tmp_path / "bad.xml"
        path.write_bytes(b"<a><b></a>")

        with pytest.raises(ParseError) as exc:
            list(iter_markup_events(str(path)))

        assert exc.value.path == str(path)

    def test_internal_entities_are_not_expanded(self):
        """Test that markup inside a DTD entity does not become elements."""
        xml = b'<!DOCTYPE r [<!ENTITY e "<extra/>">]><r><a>&e;</a></r>'

        assert _pairs(events_from_bytes(xml)) == [
            (EventKind.START, "r"),
            (EventKind.START, "a"),
            (EventKind.END, "a"),
            (EventKind.END, "r"),
        ]


class TestBlankDocuments:
    """Test that documents without any content end cleanly."""

    @pytest.mark.parametrize("data", [b"", b"  \n\t\n"], ids=["empty", "whitespace"])
    def test_blank_bytes_yield_no_events(self, data):
        """Test that blank input is end of input, not a parse error."""
        assert list(events_from_bytes(data, path="blank.xml")) == []

    def test_empty_file_yields_no_events(self, tmp_path):
        """Test that a zero-byte file on disk is accepted."""
        path = tmp_path / "empty.xml"
        path.write_bytes(b"")

        assert list(iter_markup_events(str(path))) == []

    def test_content_without_root_element_is_still_an_error(self):
        """Test that non-blank input with no element is malformed."""
        with pytest.raises(ParseError):
            list(events_from_bytes(b"not xml at all"))
