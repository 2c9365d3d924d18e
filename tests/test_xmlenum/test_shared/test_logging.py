"""Tests for correlation-aware logging."""

import logging

from xmlenum.shared import get_logger
from xmlenum.tokenization import events_from_bytes
from xmlenum.tree import TagShapeAggregator, TagShapeTree


def test_records_carry_component_and_correlation_id(caplog) -> None:
    """Test that extra fields are attached to every record."""
    logger = get_logger("xmlenum.test", "run-42", "unit")

    with caplog.at_level(logging.DEBUG, logger="xmlenum.test"):
        logger.debug("hello", extra={"path": "a.xml"})

    record = caplog.records[-1]
    assert record.component == "unit"
    assert record.correlation_id == "run-42"
    assert record.path == "a.xml"


def test_component_defaults_to_last_name_segment() -> None:
    """Test the default component name."""
    assert get_logger("xmlenum.tree.aggregator").component == "aggregator"


def test_aggregator_logs_each_document(caplog) -> None:
    """Test that per-document aggregation is logged at debug level."""
    tree = TagShapeTree(root_name="r", correlation_id="run-7")

    with caplog.at_level(logging.DEBUG, logger="xmlenum.tree.aggregator"):
        TagShapeAggregator(tree).aggregate(events_from_bytes(b"<r><a/></r>"), "doc.xml")

    messages = [r.getMessage() for r in caplog.records if r.name == "xmlenum.tree.aggregator"]
    assert messages == ["Aggregating document", "Document aggregated"]
    assert all(r.correlation_id == "run-7" for r in caplog.records
               if r.name == "xmlenum.tree.aggregator")
