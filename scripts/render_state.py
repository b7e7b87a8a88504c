#!/usr/bin/env python3
"""Render a JSON state tree as indented text or a flat JSON list.

Usage
-----
::

    python scripts/render_state.py state.json --override state_override.json
"""

from __future__ import annotations

import sys
from pathlib import Path

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from jsonstate._tools.render_cli import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
