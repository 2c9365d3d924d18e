"""xmlenum: enumerate the tag shapes found under an XML element.

Scans XML documents for occurrences of a named element, merges the nesting
of every occurrence across all documents into one shape tree, and renders it
with tags that only hold text first, then tags with children.

Progressive API Disclosure:
- Level 1: Simple functions - enumerate_files(), enumerate_shapes(), enumerate_string()
- Level 2: Aggregator and renderer - TagShapeAggregator, render_shape()
"""

__version__ = "0.1.0"
__author__ = "xmlenum Team"

# Level 1: Simple functions
from .api import enumerate_files, enumerate_shapes, enumerate_string, new_tree

# Configuration and errors
from .shared.config import ShapeConfig
from .shared.errors import InputOpenError, ParseError, UsageError, XmlEnumError

# Level 2: Aggregator, model and renderer
from .tree import (
    TagKind,
    TagNode,
    TagShapeAggregator,
    TagShapeTree,
    render_shape,
    render_tree,
)

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Simple functions
    "enumerate_files",
    "enumerate_shapes",
    "enumerate_string",
    "new_tree",

    # Level 2: Aggregator, model and renderer
    "TagShapeAggregator",
    "TagKind",
    "TagNode",
    "TagShapeTree",
    "render_shape",
    "render_tree",

    # Configuration and errors
    "ShapeConfig",
    "XmlEnumError",
    "UsageError",
    "InputOpenError",
    "ParseError",
]
