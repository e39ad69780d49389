import math
import re

from genapprox.cli import main

_GENE_LINE = re.compile(r"^(\S+) \[(\S+);(\S+)\]$")

_SMALL = ["--epochs", "2", "--generation-size", "4", "--chromosome-size", "3", "--seed", "1"]


def _gene_lines(out):
    return [m.groups() for m in map(_GENE_LINE.match, out.splitlines()) if m]


def test_prints_best_individual_over_partition(capsys):
    assert main(["0", "1", *_SMALL]) == 0
    genes = _gene_lines(capsys.readouterr().out)
    assert len(genes) == 3
    bounds = [(float(a), float(b)) for _, a, b in genes]
    assert bounds[0][0] == 0.0
    assert math.isclose(bounds[-1][1], 1.0, rel_tol=1e-5)
    assert all(math.isclose(a[1], b[0], rel_tol=1e-5) for a, b in zip(bounds, bounds[1:]))


def test_prints_progress_before_genes(capsys):
    assert main(["-1", "1", *_SMALL]) == 0
    lines = capsys.readouterr().out.splitlines()
    progress = lines[:-3]
    assert 1 <= len(progress) <= 2
    assert all(float(value) >= 0.0 for value in progress)


def test_unparsable_bound_reads_as_zero(capsys):
    assert main(["abc", "1", *_SMALL]) == 0
    genes = _gene_lines(capsys.readouterr().out)
    assert float(genes[0][1]) == 0.0


def test_empty_interval_is_an_error(capsys):
    assert main(["1", "1", *_SMALL]) == 1
    captured = capsys.readouterr()
    assert captured.err.startswith("genapprox:")
    assert captured.out == ""


def test_odd_generation_size_is_an_error(capsys):
    args = ["0", "1", "--epochs", "1", "--generation-size", "3", "--chromosome-size", "3"]
    assert main(args) == 1
    assert "even" in capsys.readouterr().err