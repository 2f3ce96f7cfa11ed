"""Allow running as ``python -m cargo_qtest``."""

from cargo_qtest.cli import main

main()
