"""``pathlib.Path`` subclass with an ``expand()`` method."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .expander import expand
from .home import HomeDirResolver


class PlainPath(type(Path())):  # type: ignore[misc]
    """Concrete path for the running platform that can expand ``~``.

    >>> PlainPath("~/.ssh/config").expand()  # doctest: +SKIP
    PlainPath('/home/alice/.ssh/config')
    """

    def expand(self, resolver: Optional[HomeDirResolver] = None) -> "PlainPath":
        """Same as :func:`plain_path.expand` applied to this path."""
        return expand(self, resolver)
