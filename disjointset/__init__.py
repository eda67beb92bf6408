from __future__ import annotations

from .core import DisjointSet
