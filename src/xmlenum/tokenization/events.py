"""Markup event stream backed by lxml.

This module adapts ``lxml.etree.iterparse`` into the minimal event vocabulary
the aggregator consumes: element starts and ends carrying the local element
name. Text, attributes, namespaces, comments and processing instructions are
not reported, and entity references are left unexpanded. A blank document
produces no events.
"""

import io
from dataclasses import dataclass
from enum import Enum, auto
from typing import BinaryIO, Iterator, Optional, Union

from lxml import etree

from xmlenum.shared import CorrelationLogger, ParseError, ShapeConfig, get_logger

Source = Union[str, BinaryIO]


class EventKind(Enum):
    """Kinds of markup events delivered to the aggregator."""

    START = auto()  # Opening tag of an element
    END = auto()    # Closing tag of an element


@dataclass(frozen=True)
class MarkupEvent:
    """Single start or end event for a named element."""

    kind: EventKind
    name: str

    def __post_init__(self) -> None:
        """Validate markup event."""
        if not self.name:
            raise ValueError("Event name cannot be empty")

    @property
    def is_start(self) -> bool:
        return self.kind is EventKind.START

    @property
    def is_end(self) -> bool:
        return self.kind is EventKind.END


_LXML_EVENTS = {"start": EventKind.START, "end": EventKind.END}


def local_name(tag: str) -> str:
    """Strip the namespace from an lxml tag, ``{uri}item`` becomes ``item``."""
    return etree.QName(tag).localname


def iter_markup_events(
    source: Source,
    config: Optional[ShapeConfig] = None,
    path: Optional[str] = None,
) -> Iterator[MarkupEvent]:
    """Tokenize an XML source into start and end events.

    Args:
        source: File name or binary file object holding the document
        config: Run configuration; defaults to ``ShapeConfig()``
        path: Name used in diagnostics, defaults to ``source`` when it is a
            file name

    Yields:
        MarkupEvent for every element start and end, in document order

    Raises:
        ParseError: If a non-blank document is not well-formed XML
    """
    config = config or ShapeConfig()
    if path is None and isinstance(source, str):
        path = source

    logger = get_logger(__name__, config.correlation_id, "markup_events")
    logger.debug("Tokenizing document", extra={"path": path})

    if isinstance(source, str):
        with open(source, "rb") as stream:
            yield from _tokenize(stream, config, path, logger)
    else:
        yield from _tokenize(source, config, path, logger)


class _ContentReader:
    """File wrapper noting whether anything besides whitespace was read."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self.has_content = False

    def read(self, size: int = -1) -> bytes:
        data = self._stream.read(size)
        if not self.has_content and data.strip():
            self.has_content = True
        return data


def _tokenize(
    stream: BinaryIO,
    config: ShapeConfig,
    path: Optional[str],
    logger: CorrelationLogger,
) -> Iterator[MarkupEvent]:
    reader = _ContentReader(stream)
    parser = etree.iterparse(
        reader,
        events=tuple(_LXML_EVENTS),
        huge_tree=config.huge_tree,
        resolve_entities=False,
        no_network=True,
    )
    seen_events = False
    try:
        for action, element in parser:
            seen_events = True
            yield MarkupEvent(_LXML_EVENTS[action], local_name(element.tag))
            if action == "end":
                # Names are all we keep, release the subtree
                element.clear()
    except etree.XMLSyntaxError as e:
        # A blank document ends before its first token, like end of input
        if not seen_events and not reader.has_content:
            logger.debug("Empty document", extra={"path": path})
            return
        raise ParseError(path, str(e)) from e



def events_from_bytes(
    data: bytes,
    config: Optional[ShapeConfig] = None,
    path: Optional[str] = None,
) -> Iterator[MarkupEvent]:
    """Tokenize an in-memory XML document."""
    return iter_markup_events(io.BytesIO(data), config, path)
