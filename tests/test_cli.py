from __future__ import annotations

import pytest

from seedonce.__main__ import main
from seedonce.generator import Generator


def test_draws_with_explicit_seed(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["1", "6", "-n", "5", "--seed", "42"]) == 0
    values = [int(line) for line in capsys.readouterr().out.split()]
    rng = Generator.from_seed(42)
    assert values == [rng.get(1, 6) for _ in range(5)]


def test_draws_from_global_generator(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["80", "120"]) == 0
    (line,) = capsys.readouterr().out.split()
    assert 80 <= int(line) <= 120


def test_invalid_range_exit_code(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["6", "1"]) == 2
    assert "Invalid range" in capsys.readouterr().err


def test_stats_output(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["1", "6", "-n", "60000", "--seed", "1", "--stats"]) == 0
    out = capsys.readouterr().out
    assert "chi-square=" in out
    assert out.strip().splitlines()[-1] in ("uniform", "NOT uniform")
    assert out.count(":") >= 6


def test_stats_with_single_value_range(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["3", "3", "-n", "10", "--stats"]) == 0
    assert "Not enough" in capsys.readouterr().out


@pytest.mark.parametrize("args", [["1", "6", "-n", "-1"], ["1", "6", "--seed", "-4"]])
def test_rejects_negative_options(args: list[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(args)
    assert exc_info.value.code == 2
