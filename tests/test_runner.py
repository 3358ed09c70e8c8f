from __future__ import annotations

import json

import pandas as pd
import pytest
import yaml

from sorter.bench import runner
from sorter.validate import ORACLE_NAME


def _write_config(tmp_path, **overrides):
    cfg = {
        "experiment_name": "tiny",
        "output_dir": str(tmp_path / "runs"),
        "seed": 42,
        "repeats": 2,
        "warmup": False,
        "disable_gc": False,
        "timeout_seconds": 30.0,
        "dataset": {"dist": "random", "params": {"range": [0, 100]}},
        "sizes": [0, 8, 40],
        "algorithms": [{"name": "selection"}, {"name": "insertion"}, "shell"],
    }
    cfg.update(overrides)
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump(cfg), encoding="utf-8")
    return path


def test_run_experiment_writes_artifacts(tmp_path):
    run_dir = runner.run_experiment(_write_config(tmp_path))

    for name in ("config_resolved.yaml", "meta.json", "results.jsonl", "summary.csv"):
        assert (run_dir / name).exists(), name

    resolved = yaml.safe_load((run_dir / "config_resolved.yaml").read_text(encoding="utf-8"))
    assert resolved["experiment_name"] == "tiny"

    meta = json.loads((run_dir / "meta.json").read_text(encoding="utf-8"))
    assert "python" in meta and "machine" in meta
    assert meta["oracle"] == ORACLE_NAME

    lines = [
        json.loads(line)
        for line in (run_dir / "results.jsonl").read_text(encoding="utf-8").splitlines()
    ]
    assert all("status" not in line for line in lines)
    assert len(lines) == 3 * 3 * 2

    summary = pd.read_csv(run_dir / "summary.csv")
    assert list(summary.columns) == runner.SUMMARY_COLUMNS
    assert len(summary) == 9
    assert set(summary["algo"]) == {"selection", "insertion", "shell"}
    sel40 = summary[(summary["algo"] == "selection") & (summary["n"] == 40)]
    assert int(sel40["comparisons"].iloc[0]) == 40 * 39 // 2
    assert int(sel40["exchanges"].iloc[0]) == 40


def test_unknown_algorithm_fails_before_writing(tmp_path):
    path = _write_config(tmp_path, algorithms=[{"name": "bogosort"}])
    with pytest.raises(KeyError, match="bogosort"):
        runner.run_experiment(path)
    assert not (tmp_path / "runs").exists()


@pytest.mark.parametrize(
    "overrides",
    [
        {"sizes": []},
        {"sizes": [10, -1]},
        {"algorithms": []},
        {"algorithms": [{"name": "shell"}, {"name": "shell"}]},
        {"dataset": "random"},
    ],
)
def test_invalid_config(tmp_path, overrides):
    with pytest.raises(ValueError):
        runner.run_experiment(_write_config(tmp_path, **overrides))


def test_missing_keys(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump({"experiment_name": "x"}), encoding="utf-8")
    with pytest.raises(ValueError, match="Missing required config keys"):
        runner.run_experiment(path)


def test_main_missing_file(tmp_path):
    with pytest.raises(SystemExit):
        runner.main([str(tmp_path / "nope.yaml")])


def test_main_runs(tmp_path):
    runner.main([str(_write_config(tmp_path, sizes=[5]))])
    runs = list((tmp_path / "runs").iterdir())
    assert len(runs) == 1
