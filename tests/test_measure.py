from __future__ import annotations

import gc

import pytest

from sorter import insertion, selection, shell
from sorter.bench.measure import count_sort_call, time_sort_call


def _time(algo, a, **overrides):
    kwargs = dict(
        algo_name=algo.__name__,
        algo_fn=algo,
        a=a,
        repeats=3,
        warmup=True,
        disable_gc=True,
        timeout_seconds=10.0,
    )
    kwargs.update(overrides)
    return time_sort_call(**kwargs)


@pytest.mark.parametrize("algo", [selection, insertion, shell])
def test_schema_and_counts(algo):
    a = [5, 3, 1, 4, 2]
    res = _time(algo, a)
    assert res["status"] == "ok"
    assert res["error"] is None
    assert res["timed_out_on_repeat"] is None
    assert res["algo"] == algo.__name__
    assert len(res["samples_ns"]) == 3
    assert all(isinstance(t, int) and t >= 0 for t in res["samples_ns"])
    assert res["output"] == [1, 2, 3, 4, 5]
    assert res["comparisons"] > 0
    assert a == [5, 3, 1, 4, 2], "harness must sort copies"


def test_count_sort_call_on_sorted_input():
    counts = count_sort_call(insertion, list(range(10)))
    assert counts == {
        "comparisons": 9,
        "exchanges": 0,
        "out_of_bounds": [],
        "output": list(range(10)),
    }


def test_gc_state_restored():
    assert gc.isenabled()
    _time(shell, [3, 2, 1], disable_gc=True)
    assert gc.isenabled()


def test_count_ops_disabled():
    res = _time(shell, [2, 1], count_ops=False)
    assert res["comparisons"] is None
    assert res["output"] is None


def test_timeout_stops_sampling():
    res = _time(selection, list(range(300))[::-1], repeats=5, warmup=False, timeout_seconds=1e-9)
    assert res["status"] == "timeout"
    assert res["timed_out_on_repeat"] == 0
    assert len(res["samples_ns"]) == 1


def test_errors_are_recorded():
    def broken(coll, begin, end):
        raise RuntimeError("nope")

    res = _time(broken, [1, 2])
    assert res["status"] == "error"
    assert "nope" in res["error"]
    assert res["samples_ns"] == []


@pytest.mark.parametrize("overrides", [{"repeats": -1}, {"timeout_seconds": 0}])
def test_invalid_arguments(overrides):
    with pytest.raises(ValueError):
        _time(shell, [1], **overrides)
