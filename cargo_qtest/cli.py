"""CLI entry point for interactive cargo test selection."""

import asyncio
import logging
import os
import sys
from collections.abc import Sequence

from pydantic import ValidationError

from cargo_qtest.arguments import parse_arguments
from cargo_qtest.command import build_test_command, run_command
from cargo_qtest.config import QtestConfig, load_config
from cargo_qtest.errors import QtestError
from cargo_qtest.filtering import filter_test_options
from cargo_qtest.lister import get_cargo_test_output
from cargo_qtest.models.arguments import CargoArguments
from cargo_qtest.selector import compute_excluded, spawn_prompt_for_tests

CONFIG_ERROR_EXIT_CODE = 2
INTERRUPTED_EXIT_CODE = 130


async def run(config: QtestConfig, arguments: CargoArguments) -> int:
    """List tests, let the user pick some and run them. Returns the exit code."""
    log = logging.getLogger("cargo_qtest")

    lines = await get_cargo_test_output(config.cargo_bin, arguments)
    options = filter_test_options(lines)

    if not options:
        log.warning("No tests found")
        return 0

    log.debug("Found %d test(s)", len(options))

    chosen = await spawn_prompt_for_tests(options)
    excluded = compute_excluded(options, chosen)

    command = build_test_command(config.cargo_bin, arguments, excluded)
    return await run_command(command)


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point."""
    if argv is None:
        argv = sys.argv[1:]

    try:
        config = load_config(os.environ)
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(CONFIG_ERROR_EXIT_CODE)

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    arguments = parse_arguments(argv)

    try:
        exit_code = asyncio.run(run(config, arguments))
    except QtestError as e:
        logging.getLogger("cargo_qtest").error("%s", e)
        sys.exit(e.exit_code)
    except KeyboardInterrupt:
        logging.getLogger("cargo_qtest").error("Interrupted")
        sys.exit(INTERRUPTED_EXIT_CODE)

    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
