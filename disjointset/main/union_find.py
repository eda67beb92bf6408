from __future__ import annotations

import sys
from collections.abc import Hashable, Sequence

import alive_progress as prog
from loguru import logger
from rich import print

from disjointset.core import DisjointSet


def main(
    elements: Sequence[Hashable],
    unions: Sequence[Sequence[Hashable]],
    queries: Sequence[Sequence[Hashable]],
    lookups: Sequence[Hashable] = (),
) -> DisjointSet:
    assert len(elements), "need at least one element"

    ds = DisjointSet(elements)

    print(ds)
    print(f"Elements: {list(elements)}")
    print(f"Parent of {elements[0]} is {ds.find(elements[0])}")
    print(f"Components: {ds.count}")

    for a, b in prog.alive_it(unions, file=sys.stdout):
        merged = ds.union(a, b)
        logger.info(f"union({a}, {b}) -> {merged}")
        print(f"Components: {ds.count}")

    print(ds)
    for key in lookups:
        print(f"Parent of {key} is {ds.find(key)}")
    print(ds)

    for a, b in queries:
        print(f"Connected ({a}, {b})? {ds.connected(a, b)}")

    print(ds.groups())
    logger.warning(f"Components: {ds.count}")
    return ds
