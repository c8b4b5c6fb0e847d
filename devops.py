"""DevOps tasks for dirctl.

Usage: uv run devops.py <task> [extra args]
Tasks: fmt, lint, test, clean

Extra arguments are passed to pytest for the test task, e.g.
``uv run devops.py test -k scanner``.
"""

import shutil
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).parent
ARTIFACT_DIRS = (".pytest_cache", ".ruff_cache", "dist", "build")


def _run(*commands: list[str]) -> None:
    for cmd in commands:
        result = subprocess.run(cmd, cwd=ROOT)  # nosec: B603, B607
        if result.returncode != 0:
            print(f"Command failed: {' '.join(cmd)}", file=sys.stderr)
            sys.exit(result.returncode)


def format_code(args: list[str]) -> None:
    """Format and auto-fix with Ruff."""
    _run(["ruff", "format", "."], ["ruff", "check", "--fix", "."])


def lint(args: list[str]) -> None:
    """Check formatting and lint rules without modifying files."""
    _run(["ruff", "format", "--check", "."], ["ruff", "check", "."])


def test(args: list[str]) -> None:
    """Run the pytest suite."""
    _run(["uv", "run", "pytest", "-q", *args])


def clean(args: list[str]) -> None:
    """Remove bytecode, tool caches and build artifacts."""
    for cache in ROOT.rglob("__pycache__"):
        shutil.rmtree(cache, ignore_errors=True)
    for name in ARTIFACT_DIRS:
        shutil.rmtree(ROOT / name, ignore_errors=True)


TASKS = {
    "fmt": format_code,
    "lint": lint,
    "test": test,
    "clean": clean,
}


if __name__ == "__main__":
    if len(sys.argv) < 2 or sys.argv[1] not in TASKS:
        print(__doc__, file=sys.stderr)
        sys.exit(2)
    TASKS[sys.argv[1]](sys.argv[2:])
