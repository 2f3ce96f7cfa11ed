"""Models for the passthrough command line."""

from collections.abc import Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True, kw_only=True)
class CargoArguments:
    """Arguments forwarded to cargo, split around the first ``--``.

    ``cargo_args`` go to ``cargo test`` itself, ``test_args`` go to the
    test harness after the separator.
    """

    cargo_args: Sequence[str] = field(default_factory=tuple)
    test_args: Sequence[str] = field(default_factory=tuple)
    watch: bool = False
