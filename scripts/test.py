"""Run lints, import contracts, type checks and the test suite with coverage."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import click

PROJECT_ROOT = Path(__file__).resolve().parents[1]
COVERAGE_TARGET = "lib_fluent_expect"


def _build_default_env() -> dict[str, str]:
    """Return the base environment for subprocess execution."""
    pythonpath = os.pathsep.join(filter(None, [str(PROJECT_ROOT / "src"), os.environ.get("PYTHONPATH")]))
    return os.environ | {"PYTHONPATH": pythonpath}


DEFAULT_ENV = _build_default_env()


@click.command(help="Run ruff, import-linter, pyright and pytest (with coverage)")
@click.option("--coverage", type=click.Choice(["on", "off"]), default="on")
@click.option("--verbose", "-v", is_flag=True, help="Print executed commands before running them")
def main(coverage: str, verbose: bool) -> None:
    def _run(cmd: list[str], *, label: str, check: bool = True) -> int:
        if verbose:
            click.echo(f"  $ {' '.join(cmd)}")
        code = subprocess.run(cmd, cwd=PROJECT_ROOT, env=DEFAULT_ENV, check=False).returncode
        if check and code != 0:
            click.echo(f"[{label}] failed with exit code {code}", err=True)
            raise SystemExit(code)
        return code

    click.echo("[1/5] Ruff lint")
    _run([sys.executable, "-m", "ruff", "check", "."], label="ruff")

    click.echo("[2/5] Ruff format (check)")
    _run([sys.executable, "-m", "ruff", "format", "--check", "."], label="ruff-format", check=False)

    click.echo("[3/5] Import-linter contracts")
    _run(["lint-imports", "--config", "pyproject.toml"], label="import-linter")

    click.echo("[4/5] Pyright type-check")
    _run([sys.executable, "-m", "pyright"], label="pyright")

    click.echo("[5/5] Pytest")
    if coverage == "on":
        _run(
            [
                sys.executable,
                "-m",
                "pytest",
                f"--cov={COVERAGE_TARGET}",
                "--cov-report=term-missing",
                "-vv",
            ],
            label="pytest",
        )
    else:
        _run([sys.executable, "-m", "pytest", "-vv"], label="pytest-no-cov")
    click.echo("All checks passed")


if __name__ == "__main__":
    main()
