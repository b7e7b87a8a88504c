"""Override loading configuration for jsonstate."""

from __future__ import annotations

import dataclasses
import os
from pathlib import Path
from typing import Any

from jsonstate.exceptions import JsonStateConfigError

OVERRIDE_ROOT = Path("/etc")
OVERRIDE_FILENAME = "state_override.json"


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def default_override_path(module: str) -> Path:
    """Conventional override location for *module*: ``/etc/<module>/state_override.json``."""
    if not module or "/" in module or module in {".", ".."}:
        raise JsonStateConfigError(f"invalid module name for override path: {module!r}")
    return OVERRIDE_ROOT / module / OVERRIDE_FILENAME


@dataclasses.dataclass(frozen=True)
class StateConfig:
    """Where to find the operator override document for a state tree.

    Parameters
    ----------
    module : str
        Name of the reporting module.  When set and no explicit
        ``override_path`` is given, the conventional
        ``/etc/<module>/state_override.json`` is used.
    override_path : str or None
        Explicit path of the override document.
    override_strict : bool
        Raise :class:`~jsonstate.exceptions.OverrideLoadError` on an
        unreadable or invalid override document instead of logging a
        warning and skipping it.
    """

    module: str = ""
    override_path: str | None = None
    override_strict: bool = False

    def resolved_override_path(self) -> Path | None:
        """Explicit override path, else the module default, else ``None``."""
        if self.override_path:
            return Path(self.override_path)
        if self.module:
            return default_override_path(self.module)
        return None

    @classmethod
    def from_env(cls, **overrides: Any) -> StateConfig:
        """Create configuration from environment variables.

        Reads ``JSONSTATE_MODULE``, ``JSONSTATE_OVERRIDE_PATH`` and
        ``JSONSTATE_OVERRIDE_STRICT``.  Explicit keyword arguments override
        environment values.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "JSONSTATE_MODULE": "module",
            "JSONSTATE_OVERRIDE_PATH": "override_path",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        if "override_strict" not in overrides:
            config_kwargs["override_strict"] = _env_bool(env.get("JSONSTATE_OVERRIDE_STRICT"), False)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
