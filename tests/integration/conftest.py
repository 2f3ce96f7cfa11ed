"""Fixtures for integration tests."""

import stat
from pathlib import Path
from typing import Protocol

import pytest


class FakeCargoFn(Protocol):
    """Protocol for fake cargo creation function."""

    def __call__(
        self, listing: str = "", *, list_exit_code: int = 0, run_exit_code: int = 0
    ) -> Path:
        """Create a fake cargo executable and return its path."""


@pytest.fixture
def invocation_log(tmp_path: Path) -> Path:
    """Path where the fake cargo records its arguments, one per line."""
    return tmp_path / "invocations.log"


@pytest.fixture
def fake_cargo(tmp_path: Path, invocation_log: Path) -> FakeCargoFn:
    """Factory for shell scripts that behave like ``cargo test``.

    The script prints ``listing`` when asked for ``--list`` and records its
    arguments to ``invocation_log`` otherwise.
    """

    def create(
        listing: str = "", *, list_exit_code: int = 0, run_exit_code: int = 0
    ) -> Path:
        listing_file = tmp_path / "listing.txt"
        listing_file.write_text(listing)

        script = tmp_path / "cargo"
        script.write_text(
            "#!/bin/sh\n"
            'for arg in "$@"; do\n'
            '  if [ "$arg" = "--list" ]; then\n'
            f'    cat "{listing_file}"\n'
            f"    exit {list_exit_code}\n"
            "  fi\n"
            "done\n"
            f'printf "%s\\n" "$@" > "{invocation_log}"\n'
            f"exit {run_exit_code}\n"
        )
        script.chmod(script.stat().st_mode | stat.S_IXUSR)
        return script

    return create
