"""Simple functions for enumerating tag shapes.

These functions cover the common cases: aggregate a list of files, a list of
already-open binary streams, or an in-memory document, and get back the
merged ``TagShapeTree``.
"""

import uuid
from contextlib import ExitStack
from pathlib import Path
from typing import BinaryIO, Iterable, List, Optional, Sequence, Tuple, Union

from xmlenum.shared import InputOpenError, ShapeConfig, get_logger
from xmlenum.tokenization import events_from_bytes, iter_markup_events
from xmlenum.tree import TagShapeAggregator, TagShapeTree

PathType = Union[str, Path]


def new_tree(root_name: str, config: Optional[ShapeConfig] = None) -> TagShapeTree:
    """Create an empty aggregation context for a run."""
    config = config or ShapeConfig()
    correlation_id = config.correlation_id or uuid.uuid4().hex[:12]
    return TagShapeTree(root_name=root_name, correlation_id=correlation_id)


def enumerate_shapes(
    sources: Iterable[Tuple[str, BinaryIO]],
    root_name: str,
    config: Optional[ShapeConfig] = None,
    tree: Optional[TagShapeTree] = None,
) -> TagShapeTree:
    """Aggregate already-open documents into one shape tree.

    Args:
        sources: ``(name, binary stream)`` pairs, processed in order
        root_name: Element name at which aggregation begins
        config: Run configuration
        tree: Existing tree to merge into; a new one is created when omitted

    Returns:
        The shared TagShapeTree

    Raises:
        ParseError: On the first document that is not well-formed

    Examples:
        >>> import io
        >>> tree = enumerate_shapes([("a.xml", io.BytesIO(b"<r><x/></r>"))], "r")
        >>> tree.to_dict()
        {'x': {}}
    """
    config = config or ShapeConfig()
    tree = tree or new_tree(root_name, config)
    aggregator = TagShapeAggregator(tree, config)

    for name, stream in sources:
        aggregator.aggregate(iter_markup_events(stream, config, name), name)

    return tree


def enumerate_files(
    paths: Sequence[PathType],
    root_name: str,
    config: Optional[ShapeConfig] = None,
) -> TagShapeTree:
    """Aggregate XML files into one shape tree.

    Every file is opened before any of them is parsed, so an unreadable
    file stops the run before any aggregation happens. All handles are
    closed on return, including when an error is raised.

    Raises:
        InputOpenError: If a file cannot be opened
        ParseError: If a file is not well-formed XML
    """
    config = config or ShapeConfig()
    logger = get_logger(__name__, config.correlation_id, "enumerate_files")

    with ExitStack() as stack:
        sources: List[Tuple[str, BinaryIO]] = []
        for path in paths:
            name = str(path)
            try:
                stream = stack.enter_context(open(path, "rb"))
            except OSError as e:
                logger.debug("Could not open input", extra={"path": name})
                raise InputOpenError(name, e.strerror or str(e)) from e
            sources.append((name, stream))

        tree = enumerate_shapes(sources, root_name, config)

    logger.debug(
        "Enumeration complete",
        extra={
            "files": tree.metrics.files_processed,
            "root_occurrences": tree.metrics.root_occurrences,
            "tags": tree.root.count(),
        },
    )
    return tree


def enumerate_string(
    xml: Union[str, bytes],
    root_name: str,
    config: Optional[ShapeConfig] = None,
) -> TagShapeTree:
    """Aggregate a single in-memory document.

    Examples:
        >>> enumerate_string("<r><a><b>1</b></a></r>", "r").to_dict()
        {'a': {'b': {}}}
    """
    config = config or ShapeConfig()
    data = xml.encode("utf-8") if isinstance(xml, str) else xml
    tree = new_tree(root_name, config)
    TagShapeAggregator(tree, config).aggregate(events_from_bytes(data, config))
    return tree
