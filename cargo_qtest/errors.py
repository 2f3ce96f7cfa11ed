"""Fatal errors raised by the qtest pipeline."""


class QtestError(Exception):
    """Base class for errors that abort a qtest run."""

    exit_code: int = 1


class RunnerNotFoundError(QtestError):
    """Raised when the cargo binary cannot be spawned."""

    def __init__(self, cargo_bin: str) -> None:
        super().__init__(f"Failed to execute '{cargo_bin}'. Is cargo installed?")
        self.cargo_bin = cargo_bin


class ListingError(QtestError):
    """Raised when listing the available tests fails."""

    def __init__(self, returncode: int) -> None:
        super().__init__(f"Listing tests failed with exit code {returncode}")
        self.returncode = returncode
        # Signal deaths report a negative code, which is not a valid exit status
        self.exit_code = returncode if returncode > 0 else 1


class InvalidOutputError(QtestError):
    """Raised when the test listing is not valid UTF-8 text."""


class SelectionAbortedError(QtestError):
    """Raised when the user interrupts the test selection prompt."""
