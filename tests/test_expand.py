from __future__ import annotations

from pathlib import Path, PurePosixPath, PureWindowsPath

import pytest

from plain_path import HomeDirNotFound, expand, starts_with_placeholder


def test_expands_ssh_config(resolver, home: Path) -> None:
    assert expand("~/.ssh/config", resolver) == home / ".ssh" / "config"
    assert str(expand("~/.ssh/config", resolver)) == "/home/alice/.ssh/config"


def test_bare_placeholder_is_home(resolver, home: Path) -> None:
    assert expand("~", resolver) == home
    assert expand("~/", resolver) == home


@pytest.mark.parametrize(
    "path",
    ["/etc/hosts", "relative/file.txt", "~foo/bar", "~foo", "foo/~", "./~", "./~/bar", "", "."],
)
def test_non_placeholder_paths_are_returned_as_is(resolver, path: str) -> None:
    assert expand(path, resolver) is path
    assert resolver.calls == []


def test_pathlike_input_is_returned_as_is(resolver) -> None:
    path = Path("/etc/hosts")

    assert expand(path, resolver) is path


def test_only_first_segment_is_replaced(resolver) -> None:
    result = expand("~/a/~/b~c", resolver)

    assert result == Path("/home/alice/a/~/b~c")


def test_dot_segments_are_kept(resolver) -> None:
    result = expand("~/../bob", resolver)

    assert result == Path("/home/alice/../bob")
    assert ".." in result.parts


def test_string_input_expands_to_path(resolver) -> None:
    assert isinstance(expand("~/x", resolver), Path)


def test_pure_path_keeps_its_class(resolver) -> None:
    result = expand(PurePosixPath("~/notes.txt"), resolver)

    assert type(result) is PurePosixPath
    assert result == PurePosixPath("/home/alice/notes.txt")


def test_windows_segments_are_recognised() -> None:
    path = PureWindowsPath("~\\Documents\\a.txt")

    result = expand(path, lambda: PureWindowsPath("C:\\Users\\alice"))

    assert result == PureWindowsPath("C:\\Users\\alice\\Documents\\a.txt")


def test_resolver_failure_raises() -> None:
    with pytest.raises(HomeDirNotFound) as exc_info:
        expand("~/anything", lambda: None)

    assert str(exc_info.value) == "Failed to determine user's home directory."
    assert exc_info.value == HomeDirNotFound()


def test_resolver_failure_ignored_without_placeholder() -> None:
    assert expand("/srv/data", lambda: None) == "/srv/data"


def test_resolver_is_queried_on_every_call(resolver) -> None:
    expand("~/a", resolver)
    expand("~/b", resolver)

    assert len(resolver.calls) == 2


def test_expanded_path_expands_to_itself(resolver) -> None:
    once = expand("~/a", resolver)

    assert expand(once, resolver) is once
    assert len(resolver.calls) == 1


def test_default_resolver_uses_home(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr("plain_path.expander.system_home_dir", lambda: tmp_path)

    assert expand("~/cfg") == tmp_path / "cfg"


def test_bytes_paths_are_rejected(resolver) -> None:
    with pytest.raises(TypeError):
        expand(b"~/x", resolver)  # type: ignore[type-var]


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("~", True),
        ("~/", True),
        ("~/a/b", True),
        ("~foo", False),
        ("~foo/bar", False),
        ("./~", False),
        ("a/~", False),
        ("", False),
        (Path("~/x"), True),
        (PurePosixPath("/~"), False),
    ],
)
def test_starts_with_placeholder(path, expected: bool) -> None:
    assert starts_with_placeholder(path) is expected
