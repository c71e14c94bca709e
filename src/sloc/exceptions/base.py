"""Root of the sloc error taxonomy."""

from typing import Any


class SlocError(Exception):
    """Any error sloc reports to the user; the CLI exits with status 1.

    Context is passed as keyword arguments and kept as strings in
    ``details``, in the order given. ``None`` values are dropped.

        >>> str(SlocError("Cannot read file: a.go", reason="EACCES"))
        'Cannot read file: a.go (reason=EACCES)'
    """

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.details = {key: str(value) for key, value in context.items() if value is not None}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({context})"
