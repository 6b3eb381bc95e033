# cli/app.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, List, Any, Dict

import json
import importlib.resources as ir
import typer

import orthopoly
from orthopoly.bases.gram_schmidt import GramSchmidtBuilder
from orthopoly.bases.normalization import classical_chebyshev, classical_legendre
from orthopoly.diagnostics.core import (
    chebyshev_roots,
    condition_number,
    gram_matrix,
    legendre_known_roots,
    orthonormality_error_from_gram,
)
from orthopoly.inner_products.base import InnerProduct
from orthopoly.inner_products.weighted import (
    ChebyshevInnerProduct,
    JacobiInnerProduct,
    LegendreInnerProduct,
)
from orthopoly.quadrature.composite import DEFAULT_PANEL_COUNT
from orthopoly.utils.backend import to_float

app = typer.Typer(no_args_is_help=True, add_completion=False)

# ---------- enums & dataclasses ----------
class Family(str, Enum):
    legendre = "legendre"
    chebyshev = "chebyshev"
    jacobi = "jacobi"

# families with a classical normalization for `rescale`
RESCALED_FAMILIES = (Family.legendre, Family.chebyshev)

@dataclass
class RunSpec:
    family: Family
    dimension: int = 5
    order: int = 5
    panels: int = DEFAULT_PANEL_COUNT
    alpha: float = 0.0                 # jacobi only
    beta: float = 0.0                  # jacobi only
    rescale: bool = False              # classical normalization; legendre and chebyshev only
    verbose: bool = False
    tag: Optional[str] = None
    results_dir: Optional[str] = None  # None: print only


# ---------- tiny IO helpers ----------
def _read_text_from_path_or_resource(path: Path, resource_pkg: str, resource_subdir: str | None = None) -> str:
    """
    Read text from a filesystem path if it exists; otherwise, try to read
    from package resources under `resource_pkg[/resource_subdir]`.
    """
    p = Path(path)
    if p.exists():
        return p.read_text()
    name = p.name
    try:
        base = ir.files(resource_pkg)
        if resource_subdir:
            base = base.joinpath(resource_subdir)
        return (base / name).read_text(encoding="utf-8")
    except (OSError, ModuleNotFoundError) as e:
        raise typer.BadParameter(f"Config not found: {path}") from e


def read_config(path: Path) -> Any:
    text = _read_text_from_path_or_resource(path, "orthopoly.cli", resource_subdir="cfgs")
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise typer.BadParameter(f"Config {path} is not valid JSON: {e}") from e

def apply_overrides(cfg: Dict[str, Any], overrides: List[str]) -> Dict[str, Any]:
    # overrides format: key=val (shallow keys only)
    for ov in overrides:
        if "=" not in ov:
            raise typer.BadParameter(f"Invalid override '{ov}', expected key=value")
        k, v = ov.split("=", 1)
        # naive coercion (int/float/bool), else str
        if v.isdigit():
            val: Any = int(v)
        else:
            try:
                val = float(v)
            except ValueError:
                if v.lower() in ("true", "false"):
                    val = (v.lower() == "true")
                else:
                    val = v
        cfg[k] = val
    return cfg

def _as_int(d: Dict[str, Any], key: str, default: int) -> int:
    v = d.get(key, default)
    if isinstance(v, bool):
        raise typer.BadParameter(f"'{key}' must be an integer, got {v!r}")
    try:
        f = float(v)
    except (TypeError, ValueError) as e:
        raise typer.BadParameter(f"'{key}' must be an integer, got {v!r}") from e
    if not f.is_integer():
        raise typer.BadParameter(f"'{key}' must be an integer, got {v!r}")
    return int(f)

def _as_float(d: Dict[str, Any], key: str, default: float) -> float:
    v = d.get(key, default)
    if isinstance(v, bool):
        raise typer.BadParameter(f"'{key}' must be a number, got {v!r}")
    try:
        return float(v)
    except (TypeError, ValueError) as e:
        raise typer.BadParameter(f"'{key}' must be a number, got {v!r}") from e

def _as_bool(d: Dict[str, Any], key: str, default: bool) -> bool:
    v = d.get(key, default)
    if isinstance(v, bool):
        return v
    if isinstance(v, str) and v.lower() in ("true", "false"):
        return v.lower() == "true"
    raise typer.BadParameter(f"'{key}' must be true or false, got {v!r}")

def to_spec(d: Dict[str, Any]) -> RunSpec:
    if "family" not in d:
        raise typer.BadParameter("Config needs a 'family' (legendre, chebyshev or jacobi)")
    try:
        family = Family(d["family"])
    except ValueError as e:
        raise typer.BadParameter(f"Unknown family: {d['family']}") from e
    spec = RunSpec(
        family=family,
        dimension=_as_int(d, "dimension", 5),
        order=_as_int(d, "order", 5),
        panels=_as_int(d, "panels", DEFAULT_PANEL_COUNT),
        alpha=_as_float(d, "alpha", 0.0),
        beta=_as_float(d, "beta", 0.0),
        rescale=_as_bool(d, "rescale", False),
        verbose=_as_bool(d, "verbose", False),
        tag=d.get("tag"),
        results_dir=d.get("results_dir"),
    )
    if spec.rescale and spec.family not in RESCALED_FAMILIES:
        raise typer.BadParameter(f"'rescale' is only supported for legendre and chebyshev, not {family.value}")
    return spec

# ---------- builders ----------
def build_inner_product(spec: RunSpec) -> InnerProduct:
    if spec.family == Family.legendre:
        return LegendreInnerProduct(order=spec.order, panels=spec.panels)
    if spec.family == Family.chebyshev:
        return ChebyshevInnerProduct(order=spec.order, panels=spec.panels)
    if spec.family == Family.jacobi:
        return JacobiInnerProduct(spec.alpha, spec.beta, order=spec.order, panels=spec.panels)
    raise typer.BadParameter(f"Unknown family: {spec.family}")

# ---------- runner ----------
def run_once(spec: RunSpec):
    dot = build_inner_product(spec)
    builder = GramSchmidtBuilder(dot, verbose=spec.verbose)
    basis = builder.build(spec.dimension)
    polys = basis.polynomials()

    G = gram_matrix(polys, dot)
    err = orthonormality_error_from_gram(G)
    kappa2 = condition_number(G)

    shown = polys
    if spec.rescale:
        if spec.family == Family.chebyshev:
            shown = classical_chebyshev(polys)
        elif spec.family == Family.legendre:
            shown = classical_legendre(polys)

    label = spec.tag or spec.family.value
    typer.echo(f"{label}: dimension={spec.dimension} order={spec.order} panels={spec.panels}")
    for i, p in enumerate(shown):
        typer.echo(f"  b_{i}(x) = {p}")
    typer.echo(f"  orthonormality error = {err:.3e}  cond(G) = {kappa2:.6g}  "
               f"build = {builder.time_build_s:.3f}s ({builder.n_inner_products} inner products)")

    if spec.results_dir:
        out_dir = Path(spec.results_dir); out_dir.mkdir(parents=True, exist_ok=True)
        out_path = out_dir / "results.jsonl"
        row = dict(
            family=spec.family.value, dimension=spec.dimension, order=spec.order,
            panels=spec.panels, alpha=spec.alpha, beta=spec.beta, tag=spec.tag or "",
            rescaled=spec.rescale,
            coefficients=[[to_float(c) for c in p] for p in shown],
            orthonormality_error=err, kappa2=kappa2,
            build_time_s=builder.time_build_s, n_inner_products=builder.n_inner_products,
        )
        with out_path.open("a") as f:
            f.write(json.dumps(row) + "\n")
        typer.echo(f"Wrote → {out_path}")
    return basis

# ---------- CLI commands ----------
@app.command("run")
def run(
    config: Path = typer.Option(..., "--config", "-c", help="Path to JSON config (single or sweep)"),
    override: List[str] = typer.Option(None, "--override", "-o", help="Shallow key=val overrides"),
):
    """Build bases described by a JSON config."""
    cfg = read_config(config)

    # parse overrides into a dict once; then merge appropriately per case
    overrides_dict: Dict[str, Any] = {}
    if override:
        overrides_dict = apply_overrides({}, override)

    # ---- Case A: top-level list -> many experiments ----
    if isinstance(cfg, list):
        for i, exp in enumerate(cfg):
            merged = {**exp, **overrides_dict} if overrides_dict else exp
            spec = to_spec(merged)
            if not spec.tag:
                spec.tag = f"exp{i}"
            run_once(spec)
        return

    # ---- Case B: sweep dict with defaults/experiments ----
    if isinstance(cfg, dict) and "experiments" in cfg:
        defaults = cfg.get("defaults", {})
        sweep_tag = cfg.get("sweep_tag")
        if overrides_dict:
            defaults = {**defaults, **overrides_dict}
        exps = cfg["experiments"]
        if not isinstance(exps, list):
            raise typer.BadParameter("'experiments' must be a list")
        for i, exp in enumerate(exps):
            merged = {**defaults, **exp}
            if sweep_tag and not merged.get("tag"):
                merged["tag"] = f"{sweep_tag}_exp{i}"
            run_once(to_spec(merged))
        return

    # ---- Case C: single experiment dict ----
    if isinstance(cfg, dict):
        single = {**cfg, **overrides_dict} if overrides_dict else cfg
        run_once(to_spec(single))
        return

    raise typer.BadParameter("Config must be a dict (single/sweep) or a list of experiment dicts.")

@app.command("demo")
def demo(
    dimension: int = typer.Option(5, "--dimension", "-d", help="Number of basis polynomials"),
    order: int = typer.Option(5, "--order", help="Gauss–Legendre order per panel (1..5)"),
    panels: int = typer.Option(DEFAULT_PANEL_COUNT, "--panels", help="Composite panels per integral"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    """
    Print the orthonormal Legendre basis and the classical Chebyshev basis,
    then check them against their known roots.
    """
    dot_l = LegendreInnerProduct(order=order, panels=panels)
    legendre = GramSchmidtBuilder(dot_l, verbose=verbose).build(dimension)
    typer.echo("Legendre:")
    for i, p in enumerate(legendre):
        typer.echo(f"L_{i}(x) = {p}")
    typer.echo("VERIFICATION")
    typer.echo("------------")
    for n in (2, 3):
        if n >= len(legendre):
            continue
        for r in legendre_known_roots(n):
            typer.echo(f"{r:+.6f} should be a root of L_{n}: L_{n}({r:+.6f}) = {legendre.evaluate(n, r):.3e}")

    dot_t = ChebyshevInnerProduct(order=order, panels=panels)
    tchebychev = classical_chebyshev(GramSchmidtBuilder(dot_t, verbose=verbose).build(dimension))
    typer.echo("Chebyshev:")
    for i, p in enumerate(tchebychev):
        typer.echo(f"T_{i}(x) = {p}")
    typer.echo("VERIFICATION")
    typer.echo("------------")
    typer.echo("Roots of each T_n (to about 1e-3, the integration is not adapted to the weight):")
    for n in range(1, len(tchebychev)):
        for x in chebyshev_roots(n):
            typer.echo(f"T_{n}({x:+.6f}) = {tchebychev[n](x):.3e}")

@app.command("version")
def version():
    """Print the package version."""
    typer.echo(f"orthopoly {orthopoly.__version__}")

@app.command("info")
def info():
    """List the available inner-product families and quadrature settings."""
    typer.echo(f"orthopoly {orthopoly.__version__}")
    typer.echo(f"families: {', '.join(f.value for f in Family)}")
    typer.echo("quadrature orders: 1..5 (Gauss–Legendre)")
    typer.echo(f"default panels: {DEFAULT_PANEL_COUNT}")

def main():
    app()

if __name__ == "__main__":
    main()
