"""Shape tree model, aggregation and rendering."""

from .aggregator import TagShapeAggregator
from .render import DEFAULT_INDENT_STEP, iter_shape_lines, render_shape, render_tree
from .shape import TagKind, TagNode, TagShapeTree

__all__ = [
    "TagShapeAggregator",
    "DEFAULT_INDENT_STEP",
    "iter_shape_lines",
    "render_shape",
    "render_tree",
    "TagKind",
    "TagNode",
    "TagShapeTree",
]
