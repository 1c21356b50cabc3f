import pytest

from limavns.cli import main

COORDS = [
    (0, 0), (1, 0), (0, 1), (1, 1),
    (100, 100), (101, 100), (100, 101), (101, 101),
]


@pytest.fixture
def instance(tmp_path):
    path = tmp_path / "instance.csv"
    path.write_text("".join(f"{x},{y}\n" for x, y in COORDS))
    return path


def _args(instance, tmp_path, runs="2"):
    return [
        str(instance), "2", "0.01", runs, "1",
        str(tmp_path / "stats"), str(tmp_path / "assign"),
    ]


def test_missing_arguments(capsys):
    assert main(["only", "three", "args"]) == 1
    assert "ARGUMENT(S) MISSING!!" in capsys.readouterr().out


def test_missing_instance(tmp_path, capsys):
    args = _args(tmp_path / "absent.csv", tmp_path)
    assert main(args) == 1
    assert "PROBLEM IN THE PATH OF THE INSTANCE FILE" in capsys.readouterr().out


def test_bad_output_path(instance, tmp_path, capsys):
    args = _args(instance, tmp_path)
    args[5] = str(tmp_path / "no_such_dir" / "stats")
    assert main(args) == 1
    assert "PROBLEM IN THE PATH OF THE OUTPUT FILE" in capsys.readouterr().out


def test_bad_assignment_path(instance, tmp_path, capsys):
    args = _args(instance, tmp_path)
    args[6] = str(tmp_path / "no_such_dir" / "assign")
    assert main(args) == 1
    assert "PROBLEM IN THE PATH OF THE ASSIGNMENT FILE" in capsys.readouterr().out


def test_successful_run_writes_files(instance, tmp_path, capsys):
    assert main(_args(instance, tmp_path)) == 0
    out = capsys.readouterr().out
    assert f"Instance: {instance}" in out
    assert "Kmax: 4" in out

    stats = (tmp_path / "stats.csv").read_text().splitlines()
    assert len(stats) == 1
    fields = stats[0].split(",")
    assert fields[0] == str(instance)
    assert len(fields) == 5
    assert "e" in fields[1] and "e" in fields[2]
    assert float(fields[1]) <= float(fields[2]) + 1e-9
    assert len(fields[3].split(".")[1]) == 4

    assignment = (tmp_path / "assign.csv").read_text().splitlines()
    assert len(assignment) == 1
    parts = assignment[0].split(",")
    assert parts[0] == str(instance)
    clusters = [int(p) for p in parts[1:]]
    assert len(clusters) == len(COORDS)
    assert sorted(clusters.count(c) for c in range(2)) == [4, 4]


def test_runs_append_lines(instance, tmp_path):
    assert main(_args(instance, tmp_path, runs="1")) == 0
    assert main(_args(instance, tmp_path, runs="1")) == 0
    assert len((tmp_path / "stats.csv").read_text().splitlines()) == 2
    assert len((tmp_path / "assign.csv").read_text().splitlines()) == 2