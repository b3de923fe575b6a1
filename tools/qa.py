#!/usr/bin/env python3
"""ShadeFM pre-commit checks: syntax, version sync and the unit tests."""

from __future__ import annotations

import argparse
import compileall
import re
import subprocess
import sys
from pathlib import Path

SOURCE_DIRS = ("shadefm", "tests", "tools")

VERSION_FILES = {
    "pyproject.toml": r'^version\s*=\s*"([^"]+)"',
    "shadefm/__init__.py": r'^__version__\s*=\s*"([^"]+)"',
}


def check_syntax(dirs=SOURCE_DIRS) -> bool:
    ok = all(compileall.compile_dir(d, quiet=1) for d in dirs if Path(d).is_dir())
    print("[OK] sources compile." if ok else "[FAIL] syntax errors found.")
    return ok


def read_versions() -> dict[str, str | None]:
    """Return the version string declared in each tracked file (None if absent)."""
    versions: dict[str, str | None] = {}
    for name, pattern in VERSION_FILES.items():
        path = Path(name)
        text = path.read_text(encoding="utf-8") if path.is_file() else ""
        match = re.search(pattern, text, flags=re.MULTILINE)
        versions[name] = match.group(1) if match else None
    return versions


def check_version_sync() -> bool:
    versions = read_versions()
    found = set(versions.values())
    if None in found or len(found) != 1:
        detail = ", ".join(f"{name}={value}" for name, value in versions.items())
        print(f"[FAIL] version mismatch: {detail}")
        return False
    print(f"[OK] version {found.pop()} everywhere.")
    return True


def run_tests() -> bool:
    cmd = [sys.executable, "-m", "unittest", "discover", "-s", "tests"]
    ok = subprocess.run(cmd, check=False).returncode == 0
    print("[OK] tests passed." if ok else "[FAIL] tests failed.")
    return ok


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Run ShadeFM checks.")
    parser.add_argument("--no-tests", action="store_true", help="Only run the static checks.")
    args = parser.parse_args(argv)

    results = [check_syntax(), check_version_sync()]
    if not args.no_tests:
        results.append(run_tests())
    return 0 if all(results) else 1


if __name__ == "__main__":
    raise SystemExit(main())
