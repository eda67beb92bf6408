from __future__ import annotations

from .disjoint_sets import DisjointSet
