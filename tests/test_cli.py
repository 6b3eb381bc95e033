"""
test_cli.py
-----------

The `orthopoly` command line, driven through typer's CliRunner.
"""

import json

import pytest
import typer
from typer.testing import CliRunner

import orthopoly
from orthopoly.cli import app
from orthopoly.cli.app import Family, apply_overrides, to_spec

runner = CliRunner()


def test_version():
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert orthopoly.__version__ in result.output


def test_info_lists_families():
    result = runner.invoke(app, ["info"])
    assert result.exit_code == 0
    for fam in ("legendre", "chebyshev", "jacobi"):
        assert fam in result.output


def test_demo_prints_both_bases():
    result = runner.invoke(app, ["demo", "--panels", "2000"])
    assert result.exit_code == 0, result.output
    assert "L_0(x) = 0.707107" in result.output
    assert "L_4(x)" in result.output
    assert "T_0(x) = 1" in result.output
    assert "T_4(x)" in result.output
    assert "should be a root of L_3" in result.output


def test_demo_unsupported_order_fails():
    result = runner.invoke(app, ["demo", "--order", "7", "--panels", "10"])
    assert result.exit_code != 0
    assert isinstance(result.exception, orthopoly.UnsupportedQuadratureOrder)


def test_run_packaged_config_with_override():
    result = runner.invoke(app, ["run", "-c", "legendre.json", "-o", "panels=50", "-o", "dimension=3"])
    assert result.exit_code == 0, result.output
    assert "dimension=3" in result.output
    assert "b_2(x)" in result.output
    assert "b_3(x)" not in result.output


def test_run_sweep_writes_results(tmp_path):
    cfg = {
        "sweep_tag": "t",
        "defaults": {"family": "jacobi", "dimension": 3, "panels": 50, "results_dir": str(tmp_path)},
        "experiments": [{"alpha": 0.0, "beta": 0.0}, {"alpha": 1.0, "beta": 1.0}],
    }
    path = tmp_path / "sweep.json"
    path.write_text(json.dumps(cfg))
    result = runner.invoke(app, ["run", "-c", str(path)])
    assert result.exit_code == 0, result.output

    rows = [json.loads(line) for line in (tmp_path / "results.jsonl").read_text().splitlines()]
    assert [r["tag"] for r in rows] == ["t_exp0", "t_exp1"]
    assert all(r["orthonormality_error"] < 1e-8 for r in rows)
    assert len(rows[0]["coefficients"]) == 3
    assert rows[1]["alpha"] == 1.0


def test_run_list_config(tmp_path):
    path = tmp_path / "list.json"
    path.write_text(json.dumps([
        {"family": "legendre", "dimension": 2, "panels": 20, "rescale": True},
        {"family": "chebyshev", "dimension": 2, "panels": 2000, "rescale": True},
    ]))
    result = runner.invoke(app, ["run", "-c", str(path)])
    assert result.exit_code == 0, result.output
    assert "exp0" in result.output and "exp1" in result.output


@pytest.mark.parametrize("cfg", [{"family": "hermite"}, {"dimension": 3}, 3])
def test_run_rejects_bad_config(tmp_path, cfg):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps(cfg))
    result = runner.invoke(app, ["run", "-c", str(path)])
    assert result.exit_code == 2


def test_run_missing_config():
    result = runner.invoke(app, ["run", "-c", "does-not-exist.json"])
    assert result.exit_code == 2


def test_run_bad_override():
    result = runner.invoke(app, ["run", "-c", "legendre.json", "-o", "panels"])
    assert result.exit_code == 2


@pytest.mark.parametrize("override", ["dimension=abc", "alpha=wide", "rescale=maybe", "verbose=2"])
def test_run_uncoercible_override(override):
    result = runner.invoke(app, ["run", "-c", "legendre.json", "-o", override, "-o", "panels=20"])
    assert result.exit_code == 2
    assert not isinstance(result.exception, ValueError)


@pytest.mark.parametrize("override", ["order=2.5", "dimension=2.5", "panels=20.5"])
def test_run_rejects_fractional_integers(override):
    result = runner.invoke(app, ["run", "-c", "legendre.json", "-o", "panels=20", "-o", override])
    assert result.exit_code == 2


def test_integral_float_values_are_accepted():
    spec = to_spec({"family": "legendre", "order": 3.0, "dimension": 4.0})
    assert spec.order == 3 and spec.dimension == 4


@pytest.mark.parametrize("text, expected", [("false", False), ("TRUE", True)])
def test_rescale_string_values(text, expected):
    assert to_spec({"family": "legendre", "rescale": text}).rescale is expected


def test_rescale_rejected_for_jacobi():
    with pytest.raises(typer.BadParameter):
        to_spec({"family": "jacobi", "rescale": True})
    result = runner.invoke(app, ["run", "-c", "jacobi_sweep.json", "-o", "rescale=true", "-o", "panels=20"])
    assert result.exit_code == 2


def test_apply_overrides_coercion():
    cfg = apply_overrides({}, ["dimension=4", "alpha=-0.5", "rescale=true", "tag=abc"])
    assert cfg == {"dimension": 4, "alpha": -0.5, "rescale": True, "tag": "abc"}


def test_to_spec_defaults():
    spec = to_spec({"family": "chebyshev"})
    assert spec.family is Family.chebyshev
    assert spec.dimension == 5
    assert spec.order == 5
    assert spec.panels == 100_000
    assert spec.results_dir is None
