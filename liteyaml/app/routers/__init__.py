"""API routers."""
from __future__ import annotations

from . import parse

__all__ = ["parse"]
