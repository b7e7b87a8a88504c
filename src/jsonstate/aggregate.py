"""Bottom-up severity rollup."""

from __future__ import annotations

from typing import TYPE_CHECKING

from jsonstate.render import iter_flat

if TYPE_CHECKING:
    from jsonstate.models import StateNode


def aggregate_levels(node: StateNode) -> StateNode:
    """Recompute container levels as the maximum of their direct children.

    Leaves (``tree is None``) keep the level their producer set.  A container
    with an empty tree aggregates to ``0``, whatever level it held before.
    Containers are visited in reverse pre-order, so every child is final
    before its parent is computed and the root ends up with the worst level
    found anywhere below it.
    """
    containers = [container for _, container in iter_flat(node) if container.tree is not None]
    for container in reversed(containers):
        # negative child levels never pull a container below 0
        container.level = max([0, *(child.level for child in container.tree or ())])
    return node
