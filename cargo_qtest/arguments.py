"""Normalisation of the command line cargo hands to the subcommand."""

from collections.abc import Sequence

from cargo_qtest.models.arguments import CargoArguments

SEPARATOR = "--"
WATCH_FLAG = "--watch"
SUBCOMMAND_SUFFIX = "qtest"


def parse_arguments(argv: Sequence[str]) -> CargoArguments:
    """Parse the arguments following the program name.

    When run as ``cargo +nightly qtest --watch -p foo -- --nocapture`` cargo
    invokes us with ``qtest --watch -p foo -- --nocapture`` (the toolchain
    selector only shows up when invoked directly through rustup proxies).

    Args:
        argv: Arguments without the program name

    Returns:
        The arguments to forward to cargo and the test harness.

    """
    args = list(argv)

    if args and args[0].startswith("+"):
        args = args[1:]

    if args and args[0].endswith(SUBCOMMAND_SUFFIX):
        args = args[1:]

    watch = False
    if args and args[0] == WATCH_FLAG:
        args = args[1:]
        watch = True

    if SEPARATOR in args:
        index = args.index(SEPARATOR)
        return CargoArguments(
            cargo_args=tuple(args[:index]),
            test_args=tuple(args[index + 1 :]),
            watch=watch,
        )

    return CargoArguments(cargo_args=tuple(args), watch=watch)
