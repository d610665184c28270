import pytest

from syncpath.paths.names import (
    change_extension,
    get_directory_name,
    get_extension,
    get_file_name,
    get_file_name_without_extension,
    has_extension,
    is_path_rooted,
)
from syncpath.utils.exceptions import InvalidArgumentError


def test_name_parts_of_relative_path() -> None:
    path = r"a\b\c.txt"
    assert get_file_name(path) == "c.txt"
    assert get_extension(path) == ".txt"
    assert get_file_name_without_extension(path) == "c"
    assert get_directory_name(path) == r"a\b"


@pytest.mark.parametrize(
    "path, expected",
    [
        ("", ""),
        ("noext", "noext"),
        ("a/b", "b"),
        ("C:x.txt", "x.txt"),
        ("dir\\", ""),
        (r"\\server\share\file", "file"),
    ],
)
def test_get_file_name(path: str, expected: str) -> None:
    assert get_file_name(path) == expected


@pytest.mark.parametrize(
    "path, extension, stem",
    [
        ("foo.", "", "foo."),
        ("foo", "", "foo"),
        (r"a.b\c", "", "c"),
        (".bashrc", ".bashrc", ""),
        ("a.tar.gz", ".gz", "a.tar"),
        ("C:\\dir.v2\\file.TXT", ".TXT", "file"),
    ],
)
def test_extension_and_stem(path: str, extension: str, stem: str) -> None:
    assert get_extension(path) == extension
    assert get_file_name_without_extension(path) == stem
    assert has_extension(path) == (extension != "")


@pytest.mark.parametrize(
    "path, expected",
    [
        (r"\x", True),
        ("/x", True),
        ("C:", True),
        ("C:x", True),
        (r"\\server\share", True),
        ("x", False),
        ("ab", False),
        ("", False),
    ],
)
def test_is_path_rooted(path: str, expected: bool) -> None:
    assert is_path_rooted(path) is expected


@pytest.mark.parametrize(
    "path, expected",
    [
        (r"C:\foo", "C:\\"),
        ("C:\\", None),
        ("C:", None),
        (r"\\server\share\x", "\\\\server\\share\\"),
        (r"\\server\share", None),
        ("foo", ""),
        ("a/b//c.txt", r"a\b"),
        (r"a\b" + "\\", r"a\b"),
        (r"\foo", "\\"),
        (r"\\?\C:\dir\file", r"\\?\C:\dir"),
    ],
)
def test_get_directory_name(path: str, expected) -> None:
    assert get_directory_name(path) == expected


class TestChangeExtension:
    """Extension replacement."""

    def test_replaces_extension(self):
        assert change_extension("a.txt", ".md") == "a.md"

    def test_adds_missing_dot(self):
        assert change_extension("a.txt", "md") == "a.md"
        assert change_extension("a", "txt") == "a.txt"

    def test_none_removes_extension(self):
        assert change_extension("a.txt", None) == "a"

    def test_empty_extension_leaves_dot(self):
        assert change_extension("a.txt", "") == "a."

    def test_dot_in_directory_ignored(self):
        assert change_extension("dir.v1\\a", ".x") == "dir.v1\\a.x"

    def test_empty_path(self):
        assert change_extension("", ".x") == ""


def test_name_functions_reject_none() -> None:
    for func in (get_file_name, get_extension, get_file_name_without_extension, get_directory_name):
        with pytest.raises(InvalidArgumentError):
            func(None)
