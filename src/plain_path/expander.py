"""Expansion of a leading ``~`` segment to the user's home directory."""

from __future__ import annotations

import os
from pathlib import Path, PurePath
from typing import Optional, TypeVar, Union

from .errors import HomeDirNotFound
from .home import HomeDirResolver, system_home_dir
from .util.log import Log

log = Log.create({"service": "plain_path.expander"})

PLACEHOLDER = "~"

PathArg = Union[str, "os.PathLike[str]"]
P = TypeVar("P", bound=PathArg)


def _text(path: PathArg) -> str:
    text = os.fspath(path)
    if isinstance(text, bytes):
        raise TypeError("bytes paths are not supported")
    return text


def _parts(path: PathArg) -> tuple[str, ...]:
    if isinstance(path, PurePath):
        return path.parts
    return PurePath(_text(path)).parts


def starts_with_placeholder(path: PathArg) -> bool:
    """Return True if the first segment of *path* is exactly ``~``.

    The check is made on path segments, so ``~foo/bar`` does not match.
    A string must also start with ``~`` itself: ``./~`` does not match even
    though ``pathlib`` drops the leading ``.`` segment.
    """
    text = _text(path)
    if not text.startswith(PLACEHOLDER):
        return False
    return _parts(path)[:1] == (PLACEHOLDER,)


def expand(path: P, resolver: Optional[HomeDirResolver] = None) -> Union[P, Path]:
    """Return *path* with a leading ``~`` segment replaced by the home directory.

    Paths that do not start with ``~`` are returned as-is, the very same
    object, without consulting the resolver. Otherwise *resolver* (by default
    :func:`system_home_dir`) is asked for the home directory once and the
    remaining segments are appended to it. The result keeps the class of a
    ``PurePath`` input and is a ``pathlib.Path`` for anything else.

    Only the first segment is considered. Symlinks, ``..`` segments and
    ``~user`` forms are left alone.

    Raises:
        HomeDirNotFound: the resolver could not determine the home directory.
        TypeError: *path* is a bytes path.
    """
    if not starts_with_placeholder(path):
        return path

    home = (resolver or system_home_dir)()
    if home is None:
        log.debug("home directory not found", {"path": _text(path)})
        raise HomeDirNotFound()

    rest = _parts(path)[1:]
    if isinstance(path, PurePath):
        expanded = type(path)(home, *rest)
    else:
        expanded = Path(home, *rest)
    log.debug("expanded path", {"path": _text(path), "expanded": str(expanded)})
    return expanded
