"""Construction and execution of the filtered ``cargo test`` run."""

import asyncio
import logging
import shlex
from collections.abc import Sequence

from cargo_qtest.errors import RunnerNotFoundError
from cargo_qtest.models.arguments import CargoArguments

logger = logging.getLogger(__name__)


def build_test_command(
    cargo_bin: str, arguments: CargoArguments, excluded: Sequence[str]
) -> Sequence[str]:
    """Build the command running everything except ``excluded``.

    The libtest harness takes a single positional filter but any number of
    ``--skip`` filters, so a selection is expressed by skipping its
    complement. ``--exact`` stops a skip from matching by substring.
    """
    command = [cargo_bin, "test", *arguments.cargo_args, "--", *arguments.test_args]
    for name in excluded:
        command.extend(("--skip", name))
    command.append("--exact")

    if arguments.watch:
        return [cargo_bin, "watch", "--", *command]
    return command


def format_command(command: Sequence[str]) -> str:
    """Render a command the way it would be typed in a shell."""
    return shlex.join(command)


def exit_status(returncode: int) -> int:
    """Map a subprocess return code to a process exit status.

    A child killed by signal N reports -N; shells report that as 128 + N.
    """
    if returncode < 0:
        return 128 - returncode
    return returncode


async def run_command(command: Sequence[str]) -> int:
    """Run a command attached to the terminal and return its exit status."""
    logger.info("Running: %s", format_command(command))

    try:
        process = await asyncio.create_subprocess_exec(*command)
    except OSError as e:
        raise RunnerNotFoundError(command[0]) from e

    try:
        returncode = await process.wait()
    except asyncio.CancelledError:
        await process.wait()
        raise

    return exit_status(returncode)
