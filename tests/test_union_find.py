from __future__ import annotations

import io
import sys

from disjointset.main import union_find


def test_demo(capsys):
    ds = union_find.main(
        list(range(1, 10)),
        unions=[[1, 2], [3, 4], [1, 3]],
        queries=[[1, 4], [1, 5]],
        lookups=[4],
    )

    assert ds.count == 6
    assert ds.connected(1, 4)
    assert not ds.connected(1, 5)

    out = capsys.readouterr().out
    assert "Parent of 4 is 1" in out
    assert "Connected (1, 4)? True" in out
    assert "Connected (1, 5)? False" in out


def test_demo_runs_after_stdout_is_replaced(monkeypatch):
    first = io.StringIO()
    monkeypatch.setattr(sys, "stdout", first)
    union_find.main([1, 2], unions=[[1, 2]], queries=[])
    first.close()

    second = io.StringIO()
    monkeypatch.setattr(sys, "stdout", second)
    ds = union_find.main([1, 2, 3], unions=[[2, 3]], queries=[[1, 3]])
    assert ds.count == 2
    assert "Connected (1, 3)? False" in second.getvalue()


def test_demo_repeated_union(capsys):
    ds = union_find.main(["a", "b"], unions=[["a", "b"], ["b", "a"]], queries=[])
    assert ds.count == 1
    assert "Components: 1" in capsys.readouterr().out
