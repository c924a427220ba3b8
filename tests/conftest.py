from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Optional

import pytest

from plain_path.util.log import Log


@pytest.fixture(autouse=True)
def _log_teardown() -> Iterator[None]:
    yield
    Log.reset()


@pytest.fixture
def home() -> Path:
    return Path("/home/alice")


@pytest.fixture
def resolver(home: Path) -> Callable[[], Optional[Path]]:
    calls: list[Path] = []

    def _resolve() -> Optional[Path]:
        calls.append(home)
        return home

    _resolve.calls = calls  # type: ignore[attr-defined]
    return _resolve
