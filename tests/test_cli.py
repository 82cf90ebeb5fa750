import json
import sys

import pytest

import run_chart


def _write_csv(tmp_path):
    path = tmp_path / "sales.csv"
    path.write_text("region,q1,q2\nEast,1,2\nWest,3,4\n", encoding="utf-8")
    return path


def test_cli_writes_artifacts(tmp_path, monkeypatch):
    out_dir = tmp_path / "out"
    argv = ["run_chart.py", str(_write_csv(tmp_path)), "--kind", "bar", "--title", "Q", "--output", str(out_dir)]
    monkeypatch.setattr(sys, "argv", argv)

    run_chart.main()

    run_dirs = list(out_dir.iterdir())
    assert len(run_dirs) == 1
    run_dir = run_dirs[0]
    assert {p.name for p in run_dir.iterdir()} == {"inputs.json", "spec.json", "chart.js", "chart.html"}
    spec = json.loads((run_dir / "spec.json").read_text(encoding="utf-8"))
    assert spec["chart_kind"] == "bar"
    assert [ds["simple_data"] for ds in spec["datasets"]] == [["1", "3"], ["2", "4"]]
    assert 'type: "bar"' in (run_dir / "chart.js").read_text(encoding="utf-8")


def test_cli_missing_file_exits(tmp_path, monkeypatch):
    monkeypatch.setattr(sys, "argv", ["run_chart.py", str(tmp_path / "missing.csv"), "--no-output"])
    with pytest.raises(SystemExit) as excinfo:
        run_chart.main()
    assert excinfo.value.code == 1
