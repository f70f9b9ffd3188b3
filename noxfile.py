# topmark:header:start
#
#   project      : Buckify
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Buckify project automation via Nox (using uv-backed virtualenvs).

Sessions:
  - `lint` / `lint_fixall`: Ruff static analysis, optionally with autofix.
  - `format_check` / `format`: Ruff formatting.
  - `qa`: pytest and pyright for every Python listed in the classifiers.
  - `property_test`: The slow hypothesis tests (opt-in).
  - `smoke`: Run the installed ``buckify`` CLI against the bundled platforms.
  - `package_check`: Build sdist/wheel and validate metadata (twine).

Common invocations:
  - `nox -s lint`
  - `nox -s qa-3.12`
"""

from __future__ import annotations

import shutil
import sys

import nox

CURRENT_PYTHON_VERSION: str = f"{sys.version_info[0]}.{sys.version_info[1]}"

PYPROJECT = nox.project.load_toml("pyproject.toml")
PYTHONS: list[str] = nox.project.python_versions(PYPROJECT) or [CURRENT_PYTHON_VERSION]

# Defaults stay fast; qa runs explicitly or in CI.
nox.options.sessions = ["lint", "format_check"]
nox.options.default_venv_backend = "uv"


def _install_dev(session: nox.Session) -> None:
    session.install("-e", ".[dev]")


def _ruff(session: nox.Session, *args: str) -> None:
    _install_dev(session)
    session.run("ruff", *args, ".")


@nox.session(python=PYTHONS)
def qa(session: nox.Session) -> None:
    """Run tests + pyright (per Python version)."""
    _install_dev(session)
    session.run("pytest", "-q", "tests", "-m", "not hypothesis_slow", *session.posargs)

    if not isinstance(session.python, str):
        session.error(f"Unexpected session.python value: {session.python!r}")
    session.run("pyright", "--pythonversion", session.python)


@nox.session
def lint(session: nox.Session) -> None:
    """Static analysis."""
    _ruff(session, "check")


@nox.session
def lint_fixall(session: nox.Session) -> None:
    """Run ruff with --fix (auto-fix lint issues)."""
    _ruff(session, "check", "--fix")


@nox.session
def format_check(session: nox.Session) -> None:
    """Check formatting."""
    _ruff(session, "format", "--check")


@nox.session
def format(session: nox.Session) -> None:
    """Apply formatting."""
    _ruff(session, "format")


@nox.session
def property_test(session: nox.Session) -> None:
    """Run the long-running property tests (developer only)."""
    _install_dev(session)
    session.run("pytest", "-vv", "tests", "-m", "hypothesis_slow", *session.posargs)


@nox.session
def smoke(session: nox.Session) -> None:
    """Exercise the console script from a directory without ``buckify.toml``."""
    session.install(".")
    tmp: str = session.create_tmp()
    with session.chdir(tmp):
        session.run("buckify", "version")
        session.run("buckify", "--no-color", "-q", "platforms")
        session.run("buckify", "--no-color", "eval", 'cfg(target_os = "linux")')
        session.run("buckify", "--no-color", "config", "dump")


@nox.session(python=CURRENT_PYTHON_VERSION)
def package_check(session: nox.Session) -> None:
    """Build sdist/wheel and validate distribution metadata (twine)."""
    _install_dev(session)
    shutil.rmtree("dist", ignore_errors=True)
    session.run("python", "-m", "build", "--sdist", "--wheel")
    session.run("twine", "check", "dist/*")
