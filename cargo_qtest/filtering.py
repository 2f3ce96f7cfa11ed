"""Extraction of test names from ``cargo test -- --list --format terse``."""

import re
from collections.abc import Iterable, Sequence

TEST_MARKER = re.compile(r": test$")


def filter_test_options(lines: Iterable[str]) -> Sequence[str]:
    """Return the names of runnable tests in listing order.

    Terse listing lines look like ``module::name: test``; benchmarks end in
    ``: benchmark`` and are dropped along with any other noise.
    """
    return [TEST_MARKER.sub("", line) for line in lines if TEST_MARKER.search(line)]
