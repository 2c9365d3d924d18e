"""Deterministic text rendering of shape trees.

Each tag is printed on its own line, indented by its depth. Within a sibling
group tags that only ever held text come first, then tags with children, and
each group is sorted by name:

    item
        name
        price
        tag
            value
"""

from typing import Iterator, List, Optional

from .shape import TagNode, TagShapeTree

DEFAULT_INDENT_STEP = 4


def iter_shape_lines(
    node: TagNode,
    indent: int = 0,
    step: int = DEFAULT_INDENT_STEP,
) -> Iterator[str]:
    """Yield the rendered lines of ``node``'s children, without newlines."""
    if indent < 0:
        raise ValueError("indent must be >= 0")
    if step < 1:
        raise ValueError("step must be >= 1")

    # (node, padding, names still to emit) frames, deepest last
    prefix = " " * indent
    stack = [(node, prefix, _ordered_names(node))]
    while stack:
        current, pad, names = stack[-1]
        if not names:
            stack.pop()
            continue
        name = names.pop()
        yield pad + name
        child = current.children[name]
        if child.is_branch:
            stack.append((child, pad + " " * step, _ordered_names(child)))


def render_shape(
    node: TagNode,
    indent: int = 0,
    step: int = DEFAULT_INDENT_STEP,
) -> str:
    """Render ``node``'s children as text, one newline-terminated line per tag."""
    return "".join(line + "\n" for line in iter_shape_lines(node, indent, step))


def render_tree(tree: TagShapeTree, step: Optional[int] = None) -> str:
    """Render the top-level tags of an aggregated run."""
    return render_shape(tree.root, 0, step or DEFAULT_INDENT_STEP)


def _ordered_names(node: TagNode) -> List[str]:
    # Reversed so the next name to emit is popped from the end
    names = node.leaves() + node.branches()
    names.reverse()
    return names
