"""entrylayout: side-by-side layout of overlapping calendar entries.

Public API:
  - import from `entrylayout.api` (preferred) or `import entrylayout` (re-export)
"""

from __future__ import annotations

from .api import *  # noqa: F401,F403
from . import api as _api

__all__ = list(_api.__all__)
