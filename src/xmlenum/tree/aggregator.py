"""Tag-shape aggregation over markup event streams.

The aggregator scans each document for occurrences of the root element and
merges the nesting of every occurrence into one shared ``TagShapeTree``.
Because the same ``TagNode`` is reused for a given name at a given position,
the children recorded for a tag are the union over every occurrence in every
document of the run.
"""

import time
from typing import Iterable, Iterator, List, Optional, Tuple

from xmlenum.shared import ShapeConfig, get_logger
from xmlenum.tokenization import MarkupEvent

from .shape import TagNode, TagShapeTree


class TagShapeAggregator:
    """Merges the element nesting found under a root element into a shape tree.

    One aggregator is created per run and fed each document in turn; the tree
    it mutates is owned by the caller.
    """

    def __init__(self, tree: TagShapeTree, config: Optional[ShapeConfig] = None) -> None:
        """Initialize aggregator.

        Args:
            tree: Shared shape tree to merge into
            config: Run configuration
        """
        self.tree = tree
        self.config = config or ShapeConfig()
        self.logger = get_logger(
            __name__,
            tree.correlation_id or self.config.correlation_id,
            "tag_shape_aggregator",
        )

    def aggregate(self, events: Iterable[MarkupEvent], path: Optional[str] = None) -> None:
        """Consume one document's events, merging every root occurrence.

        Args:
            events: Markup events of a single document
            path: Document name for diagnostics

        Raises:
            ParseError: Propagated from the tokenizer on malformed input;
                anything merged before the error stays merged
        """
        start_time = time.time()
        metrics = self.tree.metrics
        root_name = self.tree.root_name
        occurrences = 0

        self.logger.debug("Aggregating document", extra={"path": path, "root": root_name})

        stream = iter(events)
        for event in stream:
            metrics.events_consumed += 1
            if event.is_start and event.name == root_name:
                occurrences += 1
                self._descend(stream, root_name, self.tree.root)

        metrics.root_occurrences += occurrences
        metrics.files_processed += 1
        metrics.processing_time_ms += (time.time() - start_time) * 1000

        self.logger.debug(
            "Document aggregated",
            extra={
                "path": path,
                "root_occurrences": occurrences,
                "elements_recorded": metrics.elements_recorded,
            },
        )

    def _descend(self, stream: Iterator[MarkupEvent], name: str, node: TagNode) -> None:
        """Record the children of one open element until it closes.

        Open elements are kept on an explicit stack of ``(name, node)`` frames,
        so nesting depth is bounded by the document alone.
        """
        metrics = self.tree.metrics
        frames: List[Tuple[str, TagNode]] = [(name, node)]

        for event in stream:
            metrics.events_consumed += 1
            current_name, current = frames[-1]

            if event.is_start:
                if event.name not in current:
                    metrics.elements_recorded += 1
                frames.append((event.name, current.child(event.name)))
            elif event.name == current_name:
                frames.pop()
                if not frames:
                    return
