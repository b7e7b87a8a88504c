"""Override merge engine.

An override document is a tree of the same shape as the state tree.  It is
merged into a state tree in place and may only change ``level``,
``message`` and ``override_applied`` on nodes that already exist.  It never
adds or removes nodes, so an override cannot turn a leaf into a container or
invent a component that is not being reported.

Matching rules, applied recursively from the root:

* level and message are replaced when the override's ``source`` differs
  from the state node's ``source``.  Existing override documents rely on
  this exact condition: a wildcard child (``"*"``) always differs from a
  real source and so always applies, while a child matched by exact source
  passes the filter below but is then left untouched at this step.
* descent happens only when both sides have a ``tree`` (not ``None``).
* an override child with source ``"*"`` is merged into every child of the
  state node; any other override child only into children with an equal
  ``source`` (the empty string is an exact value, not a wildcard).
* override children that match nothing are ignored.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jsonstate.models import StateNode

_logger = logging.getLogger(__name__)

WILDCARD_SOURCE = "*"


def _candidates(children: list[StateNode], source: str) -> list[StateNode]:
    """Children of a state node that an override child with *source* targets."""
    if source == WILDCARD_SOURCE:
        return children
    return [child for child in children if child.source == source]


def apply_override(state: StateNode, override: StateNode | None) -> None:
    """Merge *override* into *state* in place.  ``None`` is a no-op.

    Pairs are visited depth-first in override order, so when several
    override children target the same node the last one wins.
    """
    if override is None:
        return

    pending: list[tuple[StateNode, StateNode]] = [(state, override)]
    while pending:
        target, source_override = pending.pop()

        if source_override.source != target.source:
            target.override_applied = True
            target.level = source_override.level
            target.message = source_override.message

        if source_override.tree is None or target.tree is None:
            continue

        pairs: list[tuple[StateNode, StateNode]] = []
        for override_child in source_override.tree:
            candidates = _candidates(target.tree, override_child.source)
            if not candidates:
                _logger.debug(
                    "Override for source %r under %r matched no state node",
                    override_child.source,
                    target.source,
                )
                continue
            pairs.extend((candidate, override_child) for candidate in candidates)
        pending.extend(reversed(pairs))
