import pytest

from syncpath.paths.combine import combine, combine_two
from syncpath.utils.exceptions import InvalidArgumentError


@pytest.mark.parametrize(
    "path1, path2, expected",
    [
        ("a", "b", "a\\b"),
        ("a\\", "b", "a\\b"),
        ("a", "C:\\rooted", "C:\\rooted"),
        ("a", "\\b", "\\b"),
        ("C:", "x", "C:x"),
        ("", "b", "b"),
        ("a", "", "a"),
        ("", "", ""),
        ("\\\\server\\share", "dir", "\\\\server\\share\\dir"),
    ],
)
def test_combine_two_fragments(path1: str, path2: str, expected: str) -> None:
    assert combine(path1, path2) == expected


def test_combine_three_fragments() -> None:
    assert combine("a", "b", "c") == "a\\b\\c"
    assert combine("a", "C:\\x", "y") == "C:\\x\\y"
    assert combine("a", "", "c") == "a\\c"


def test_combine_sanitizes_fragments() -> None:
    assert combine("dir", "a|b") == "dir\\a_b"
    assert combine("root", "CON.txt") == "root\\_CON.txt"
    assert combine("dir", "..") == "dir\\__"


def test_combine_without_sanitizing() -> None:
    assert combine("dir", "a|b", sanitize=False) == "dir\\a|b"
    assert combine("a/", "b", sanitize=False) == "a/b"


def test_combine_keeps_dots_when_allowed() -> None:
    assert combine("dir", "..", allow_dots_in_names=True) == "dir\\.."


def test_combine_custom_substitute() -> None:
    assert combine("dir", "a*b", substitute="-") == "dir\\a-b"
    assert combine("dir", "a*b", check_wildcards=False) == "dir\\a*b"


@pytest.mark.parametrize(
    "args, argument",
    [
        ((None, "b"), "path1"),
        (("a", None), "path2"),
    ],
)
def test_combine_rejects_none(args, argument) -> None:
    with pytest.raises(InvalidArgumentError) as exc_info:
        combine(*args)
    assert exc_info.value.argument == argument


def test_combine_two_does_not_sanitize() -> None:
    assert combine_two("dir", "CON") == "dir\\CON"


@pytest.mark.parametrize("substitute", [None, "", "ab", ":", "\\"])
def test_combine_rejects_bad_substitute(substitute) -> None:
    with pytest.raises(InvalidArgumentError) as exc_info:
        combine("dir", "a|b", substitute=substitute)
    assert exc_info.value.argument == "substitute"


def test_combine_checks_substitute_without_sanitizing() -> None:
    with pytest.raises(InvalidArgumentError):
        combine("dir", "file", sanitize=False, substitute=":")
