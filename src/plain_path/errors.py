"""Error raised when ``~`` cannot be expanded."""

from __future__ import annotations


class HomeDirNotFound(RuntimeError):
    """Raised when the current user's home directory cannot be determined.

    Derives from ``RuntimeError`` like the error ``pathlib.Path.home()``
    raises in the same situation. Carries no data: all instances are equal.
    """

    message = "Failed to determine user's home directory."

    def __init__(self) -> None:
        super().__init__(self.message)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, HomeDirNotFound):
            return True
        return NotImplemented

    def __hash__(self) -> int:
        return hash(HomeDirNotFound)

    def __reduce__(self):
        return (HomeDirNotFound, ())

    def __repr__(self) -> str:
        return "HomeDirNotFound()"
