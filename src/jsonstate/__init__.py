"""jsonstate - Hierarchical health/status reports with operator overrides."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("jsonstate")
except PackageNotFoundError:
    __version__ = "0+local"
from jsonstate.aggregate import aggregate_levels
from jsonstate.config import StateConfig, default_override_path
from jsonstate.exceptions import JsonStateConfigError, JsonStateError, OverrideLoadError
from jsonstate.levels import (
    STATE_ATTENTION,
    STATE_DISABLED,
    STATE_ERROR,
    STATE_FAULT,
    STATE_OK,
    STATE_PANIC,
    STATE_UNKNOWN,
    STATE_WARNING,
    Severity,
    band,
    band_name,
)
from jsonstate.merge import WILDCARD_SOURCE, apply_override
from jsonstate.models import FlatStateEntry, StateNode
from jsonstate.overrides import apply_override_file, load_override
from jsonstate.render import flatten, flatten_to_dicts, render

__all__ = [
    "__version__",
    "FlatStateEntry",
    "JsonStateConfigError",
    "JsonStateError",
    "OverrideLoadError",
    "STATE_ATTENTION",
    "STATE_DISABLED",
    "STATE_ERROR",
    "STATE_FAULT",
    "STATE_OK",
    "STATE_PANIC",
    "STATE_UNKNOWN",
    "STATE_WARNING",
    "Severity",
    "StateConfig",
    "StateNode",
    "WILDCARD_SOURCE",
    "aggregate_levels",
    "apply_override",
    "apply_override_file",
    "band",
    "band_name",
    "default_override_path",
    "flatten",
    "flatten_to_dicts",
    "load_override",
    "render",
]
