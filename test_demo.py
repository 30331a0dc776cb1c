"""
Demo driver output.
"""

import pytest

from scalar_aad.demo import main


def test_default_add(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Value: 3.000000, Gradient: 1.000000",
        "Value: 2.000000, Gradient: 1.000000",
        "Value: 5.000000, Gradient: 1.000000",
    ]


def test_forward_only(capsys):
    main(["--no-backward"])
    out = capsys.readouterr().out.splitlines()
    assert all(line.endswith("Gradient: 0.000000") for line in out)


def test_subtract(capsys):
    main(["--a", "-3", "--b", "2", "--op", "sub"])
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Value: -3.000000, Gradient: 1.000000",
        "Value: 2.000000, Gradient: 0.000000",
        "Value: -5.000000, Gradient: 1.000000",
    ]


def test_multiply_clipped(capsys):
    main(["--a", "50", "--b", "2", "--op", "mul"])
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Value: 50.000000, Gradient: 2.000000",
        "Value: 2.000000, Gradient: 10.000000",
        "Value: 100.000000, Gradient: 1.000000",
    ]


def test_rejects_non_positive_clip(capsys):
    for bad in ("0", "-1"):
        with pytest.raises(SystemExit) as exc:
            main(["--clip", bad])
        assert exc.value.code == 2
        assert "--clip must be positive" in capsys.readouterr().err
