"""Depth-first flattening and text rendering of a state tree."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

from jsonstate.levels import band_name

if TYPE_CHECKING:
    from jsonstate.models import FlatStateEntry, StateNode

INDENT = "  "


def iter_flat(node: StateNode) -> Iterator[tuple[int, StateNode]]:
    """Yield ``(depth, node)`` in pre-order, children in insertion order."""
    stack: list[tuple[int, StateNode]] = [(0, node)]
    while stack:
        depth, current = stack.pop()
        yield depth, current
        if current.tree is not None:
            stack.extend((depth + 1, child) for child in reversed(current.tree))


def flatten(node: StateNode) -> list[FlatStateEntry]:
    return node.flatten()


def flatten_to_dicts(node: StateNode) -> list[dict[str, Any]]:
    """Flat JSON export: one dict per node with a mandatory ``depth`` key."""
    return [entry.to_dict() for entry in node.flatten()]


def render_line(entry: FlatStateEntry) -> str:
    line = INDENT * entry.depth
    if entry.source:
        line += f"- [{entry.source}]: "
    line += f"{entry.level} {band_name(entry.level)}"
    if entry.message:
        line += f": {entry.message}"
    return line


def render(node: StateNode) -> str:
    """Render *node* as indented text, one line per node.

    Call ``aggregate_levels()`` first if container levels should reflect
    their children; rendering does not aggregate.
    """
    return "".join(render_line(entry) + "\n" for entry in node.flatten())
