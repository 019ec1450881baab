# app/core/version.py
"""Service version, as reported by the health endpoints and the provider User-Agent."""
import os
import subprocess
from functools import lru_cache
from importlib.metadata import PackageNotFoundError, version as distribution_version
from pathlib import Path
from typing import Optional


DISTRIBUTION_NAME = "wallet-snapshot-gateway"
VERSION_FILE = Path(__file__).parent.parent.parent / "VERSION"
UNKNOWN_VERSION = "0.0.0-unknown"


def _read_version_file() -> Optional[str]:
    if not VERSION_FILE.exists():
        return None
    return VERSION_FILE.read_text().strip() or None


def _git(*args: str) -> str:
    return subprocess.run(
        ["git", *args], capture_output=True, text=True, check=True
    ).stdout.strip()


def _version_from_git() -> Optional[str]:
    """0.<commit_count>.<short_hash> for a source checkout, None outside one."""
    try:
        return f"0.{_git('rev-list', '--count', 'HEAD')}.{_git('rev-parse', '--short', 'HEAD')}"
    except (subprocess.CalledProcessError, FileNotFoundError):
        return None


def _version_from_metadata() -> Optional[str]:
    try:
        return distribution_version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return None


@lru_cache()
def get_version() -> str:
    """Return the first version found in this order:

    1. VERSION environment variable (container deployments)
    2. VERSION file at the repository root
    3. Git metadata of a source checkout
    4. Installed distribution metadata
    5. 0.0.0-unknown
    """
    env_version = os.environ.get("VERSION", "").strip()
    if env_version:
        return env_version

    return (
        _read_version_file()
        or _version_from_git()
        or _version_from_metadata()
        or UNKNOWN_VERSION
    )


VERSION = get_version()
