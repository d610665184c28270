import pytest

from syncpath.paths.segments import SegmentResult, is_forbidden_name, sanitize_segment


@pytest.mark.parametrize(
    "segment, expected",
    [
        (".", "_"),
        ("..", "__"),
        ("foo.", "foo_"),
        ("...", ".._"),
        ("CON", "_CON"),
        ("con", "_con"),
        ("CON.txt", "_CON.txt"),
        ("CONIN$", "_CONIN$"),
        ("nul.txt.", "_nul.txt_"),
        ("CON.", "CON_"),
    ],
)
def test_sanitize_segment_rewrites(segment: str, expected: str) -> None:
    assert sanitize_segment(segment, "_") == SegmentResult(expected, True)


@pytest.mark.parametrize("segment", ["", "normal.txt", "COM0", "Lpt9.tar.gz", "CONSOLE", ".bashrc"])
def test_sanitize_segment_keeps(segment: str) -> None:
    assert sanitize_segment(segment, "_") == SegmentResult(segment, False)


def test_navigation_segments_kept_when_allowed() -> None:
    assert sanitize_segment(".", "_", allow_dots_in_names=True) == SegmentResult(".", False)
    assert sanitize_segment("..", "_", allow_dots_in_names=True) == SegmentResult("..", False)


def test_trailing_dot_still_replaced_when_dots_allowed() -> None:
    assert sanitize_segment("foo.", "-", allow_dots_in_names=True).value == "foo-"


def test_forbidden_names() -> None:
    for name in ["CON", "prn", "Aux", "NUL", "COM1", "com9", "LPT1", "lpt9", "CONIN$", "conout$"]:
        assert is_forbidden_name(name)
    for name in ["COM10", "LPT0", "CONIN", "", "NULL"]:
        assert not is_forbidden_name(name)
