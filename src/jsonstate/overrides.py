"""Loading operator override documents and running a reporting cycle.

An override document is a serialised state tree, typically stored at
``/etc/<module>/state_override.json``.  Overrides are optional and
best-effort: a missing file is not an error, and by default a broken file is
logged and skipped so that reporting keeps working.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from jsonstate.config import StateConfig
from jsonstate.exceptions import OverrideLoadError
from jsonstate.models import StateNode

_logger = logging.getLogger(__name__)


def load_override(path: str | Path, *, strict: bool = False) -> StateNode | None:
    """Read and validate the override document at *path*.

    Returns ``None`` when the file does not exist.  An unreadable file,
    invalid JSON or a document that does not describe a state tree raises
    :class:`OverrideLoadError` when *strict* is set; otherwise a warning is
    logged and ``None`` is returned.
    """
    override_path = Path(path)
    if not override_path.exists():
        _logger.debug("No override document at %s", override_path)
        return None

    try:
        text = override_path.read_text(encoding="utf-8")
        override = StateNode.from_json(text)
    except (OSError, UnicodeDecodeError, ValidationError) as exc:
        if strict:
            raise OverrideLoadError(f"Invalid override document {override_path}: {exc}", path=override_path) from exc
        _logger.warning("Ignoring override document %s: %s", override_path, exc)
        return None

    _logger.debug("Loaded override document %s", override_path)
    return override


def apply_override_file(root: StateNode, config: StateConfig) -> StateNode:
    """Apply the configured override document to *root*, then aggregate levels.

    This is the step a reporting surface runs right before reading or
    rendering the root state.
    """
    path = config.resolved_override_path()
    if path is not None:
        root.apply(load_override(path, strict=config.override_strict))
    return root.aggregate_levels()
