"""State tree data model.

A :class:`StateNode` is one component in a health report: an identifier
(``source``), a severity ``level``, an optional ``message`` and an ordered
list of child nodes in ``tree``.  ``tree is None`` marks a pure leaf, while
an empty list marks a container that currently has no children; the two are
kept apart through serialisation.

JSON shape (keys in brackets are omitted when empty/false)::

    {"level": 200, ["source": "db"], ["message": "..."], ["tree": [...]], ["override": true]}

``tree`` is only omitted when it is ``None``; ``"tree": []`` survives a round
trip.
"""

from __future__ import annotations

import json
from collections.abc import Iterator
from typing import Any, ClassVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    StrictBool,
    StrictInt,
    model_serializer,
)

from jsonstate.aggregate import aggregate_levels
from jsonstate.merge import apply_override
from jsonstate.render import iter_flat, render


class JsonStateModel(BaseModel):
    """Base for serialisable state models.

    Subclasses list the fields that are dropped from the dumped dict when
    they hold an empty/false value in ``_OMIT_IF_EMPTY``, and the fields that
    are dropped only when ``None`` in ``_OMIT_IF_NONE``.
    """

    _OMIT_IF_EMPTY: ClassVar[tuple[str, ...]] = ()
    _OMIT_IF_NONE: ClassVar[tuple[str, ...]] = ()

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
    )

    @model_serializer(mode="wrap")
    def _omit_empty(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data: dict[str, Any] = handler(self)
        for name in type(self)._OMIT_IF_EMPTY:
            for key in _dump_keys(type(self), name):
                if key in data and not data[key]:
                    del data[key]
        for name in type(self)._OMIT_IF_NONE:
            for key in _dump_keys(type(self), name):
                if key in data and data[key] is None:
                    del data[key]
        return data

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-compatible dict (wire key names)."""
        return self.model_dump(by_alias=True)

    def to_json(self, *, indent: int | None = None) -> str:
        """Serialise to a JSON string using the wire key names."""
        return json.dumps(self.to_dict(), indent=indent)


def _dump_keys(model_cls: type[BaseModel], name: str) -> tuple[str, ...]:
    """Both the attribute name and its alias, whichever the dump used."""
    field = model_cls.model_fields[name]
    if field.alias and field.alias != name:
        return (name, field.alias)
    return (name,)


class FlatStateEntry(JsonStateModel):
    """One node of a flattened tree, tagged with its depth (root is ``0``)."""

    _OMIT_IF_EMPTY: ClassVar[tuple[str, ...]] = ("source", "message", "override_applied")

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    depth: int
    level: int = 0
    source: str = ""
    message: str = ""
    override_applied: bool = Field(default=False, alias="override")


class StateNode(JsonStateModel):
    """A node of the state tree.

    Build a tree top-down with :meth:`new`, :meth:`add` and :meth:`set`,
    merge operator overrides with :meth:`apply`, then call
    :meth:`aggregate_levels` before reading the root's level or rendering.
    The tree is not safe for concurrent mutation.

    Tree walks (merge, aggregation, flattening, lookup) are iterative and
    handle any depth.  JSON (de)serialisation goes through pydantic, which
    limits nesting depth; keep serialised trees shallow.

    Wire fields are strict: ``level`` must be a JSON integer and
    ``override`` a JSON boolean.
    """

    _OMIT_IF_EMPTY: ClassVar[tuple[str, ...]] = ("source", "message", "override_applied")
    _OMIT_IF_NONE: ClassVar[tuple[str, ...]] = ("tree",)

    level: StrictInt = 0
    source: str = ""
    message: str = ""
    tree: list[StateNode] | None = None
    override_applied: StrictBool = Field(default=False, alias="override")

    @classmethod
    def new(cls, source: str = "") -> StateNode:
        """Create a leaf node with level ``0`` and no message."""
        return cls(source=source)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> StateNode:
        return cls.model_validate(data)

    @classmethod
    def from_json(cls, text: str | bytes) -> StateNode:
        return cls.model_validate_json(text)

    def set(self, level: int, message: str = "") -> StateNode:
        """Overwrite level and message on this node.

        Meant for leaves only: on a node with a tree, the next
        :meth:`aggregate_levels` call replaces the level set here.
        """
        self.level = level
        self.message = message
        return self

    def add(self, *children: StateNode) -> StateNode:
        """Append *children* to this node's tree, preserving call order.

        Without children this is a no-op: a leaf stays a leaf.  Build an empty
        container explicitly with ``StateNode(tree=[])``.
        """
        if not children:
            return self
        if self.tree is None:
            self.tree = []
        self.tree.extend(children)
        return self

    def find_by_source(self, *path: str) -> StateNode | None:
        """Descend one tree level per *path* element, matching ``source`` exactly.

        Returns ``None`` when this node has no tree, when *path* is empty or
        when any element of the path has no match.  With duplicate sibling
        sources the first match wins.
        """
        node = self
        for source in path:
            if node.tree is None:
                return None
            node = next((child for child in node.tree if child.source == source), None)
            if node is None:
                return None
        return node if path else None

    def apply(self, override: StateNode | None) -> StateNode:
        """Merge an override tree into this tree in place (see :mod:`jsonstate.merge`)."""
        apply_override(self, override)
        return self

    def aggregate_levels(self) -> StateNode:
        """Set every container's level to the worst level among its children."""
        return aggregate_levels(self)

    def flatten(self) -> list[FlatStateEntry]:
        """Pre-order list of :class:`FlatStateEntry`, one per node."""
        return [
            FlatStateEntry(
                depth=depth,
                level=int(node.level),
                source=node.source,
                message=node.message,
                override_applied=node.override_applied,
            )
            for depth, node in iter_flat(self)
        ]

    def walk(self) -> Iterator[tuple[int, StateNode]]:
        """Yield ``(depth, node)`` pairs in pre-order."""
        return iter_flat(self)

    def render(self) -> str:
        """Human-readable, indented rendering.  Does not aggregate."""
        return render(self)

    def __str__(self) -> str:
        return self.render()
