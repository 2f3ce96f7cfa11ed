"""List the tests cargo knows about without running them."""

import asyncio
import logging
from collections.abc import Sequence

from cargo_qtest.errors import InvalidOutputError, ListingError, RunnerNotFoundError
from cargo_qtest.models.arguments import CargoArguments

logger = logging.getLogger(__name__)

LIST_FLAGS = ("--list", "--format", "terse")


def build_list_command(cargo_bin: str, arguments: CargoArguments) -> Sequence[str]:
    """Build the argument vector that asks the test harness for its tests."""
    return [
        cargo_bin,
        "test",
        *arguments.cargo_args,
        "--",
        *LIST_FLAGS,
        *arguments.test_args,
    ]


async def get_cargo_test_output(
    cargo_bin: str, arguments: CargoArguments
) -> Sequence[str]:
    """Run cargo in list mode and return its stdout lines.

    Compilation progress and errors go to stderr, which stays attached to
    the terminal.

    Raises:
        RunnerNotFoundError: If the cargo binary cannot be executed
        ListingError: If cargo exits with a non-zero status
        InvalidOutputError: If the listing is not valid UTF-8

    """
    command = build_list_command(cargo_bin, arguments)
    logger.debug("Listing tests: %s", command)

    try:
        process = await asyncio.create_subprocess_exec(
            *command,
            stdout=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        raise RunnerNotFoundError(cargo_bin) from e

    try:
        stdout, _ = await process.communicate()
    except asyncio.CancelledError:
        # Ctrl-C also reaches cargo; let it finish before giving up
        await process.communicate()
        raise

    if process.returncode != 0:
        raise ListingError(process.returncode)

    try:
        output = stdout.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidOutputError(f"Reading test listing failed: {e}") from e

    lines = output.splitlines()
    logger.debug("Cargo listed %d line(s)", len(lines))
    return lines
