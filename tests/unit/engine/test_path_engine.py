import pytest

from syncpath.config.settings import PathSettings, get_settings
from syncpath.engine import PathEngine
from syncpath.paths.root import RootKind
from syncpath.paths.validation import ValidationPolicy
from syncpath.utils.exceptions import IllegalPathCharactersError, InvalidArgumentError


@pytest.fixture
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_engine_uses_configured_substitute() -> None:
    engine = PathEngine(PathSettings(substitute_char="-"))
    assert engine.replace_invalid_chars("dir\\a|b") == "dir\\a-b"
    assert engine.sanitize_name("CON") == "-CON"
    assert engine.combine("dir", "x?y") == "dir\\x-y"


def test_engine_defaults_to_global_settings(monkeypatch, clear_settings_cache) -> None:
    monkeypatch.setenv("SYNCPATH_SUBSTITUTE_CHAR", "~")
    get_settings.cache_clear()
    engine = PathEngine()
    assert engine.settings.substitute_char == "~"
    assert engine.replace_invalid_chars("a|b") == "a~b"


def test_engine_dots_policy() -> None:
    engine = PathEngine(PathSettings(allow_dots_in_names=True))
    assert engine.combine("dir", "..") == "dir\\.."
    assert engine.combine("dir", "..", allow_dots_in_names=False) == "dir\\__"
    assert engine.replace_invalid_chars(".") == "."


def test_engine_wildcard_policy() -> None:
    engine = PathEngine(PathSettings(check_wildcards=False))
    assert engine.replace_invalid_chars("a*b") == "a*b"


def test_engine_name_extraction() -> None:
    engine = PathEngine(PathSettings())
    path = "C:\\dir\\report.final.pdf"
    assert engine.get_file_name(path) == "report.final.pdf"
    assert engine.get_extension(path) == ".pdf"
    assert engine.get_file_name_without_extension(path) == "report.final"
    assert engine.get_directory_name(path) == "C:\\dir"
    assert engine.get_root_length(path) == 3
    assert engine.classify_root(path).kind == RootKind.DRIVE_LETTER
    assert engine.is_path_rooted(path)


class TestValidationPolicy:
    """Strict and permissive engines."""

    def test_permissive_accepts_illegal_characters(self):
        engine = PathEngine(PathSettings())
        assert engine.get_file_name("dir\\a<b") == "a<b"

    def test_strict_rejects_illegal_characters(self):
        engine = PathEngine(PathSettings(validation_policy=ValidationPolicy.STRICT))
        with pytest.raises(IllegalPathCharactersError):
            engine.get_file_name("dir\\a<b")

    def test_strict_still_sanitizes(self):
        engine = PathEngine(PathSettings(validation_policy=ValidationPolicy.STRICT))
        assert engine.replace_invalid_chars("a<b") == "a_b"

    def test_none_rejected(self):
        engine = PathEngine(PathSettings())
        with pytest.raises(InvalidArgumentError):
            engine.normalize(None)


class TestShortPathExpansion:
    """Engine-level short-name expansion."""

    def test_expansion_enabled(self):
        def resolver(path):
            return path.replace("PROGRA~1", "Program Files")

        engine = PathEngine(PathSettings(expand_short_paths=True), resolver=resolver)
        assert engine.normalize("C:/PROGRA~1/x") == "C:\\Program Files\\x"

    def test_expansion_disabled(self):
        def resolver(path):
            raise AssertionError("resolver should not be called")

        engine = PathEngine(PathSettings(), resolver=resolver)
        assert engine.normalize("C:/PROGRA~1/x") == "C:\\PROGRA~1\\x"


def test_engine_identity() -> None:
    engine = PathEngine(PathSettings(case_sensitive_filenames=False))
    assert engine.identity_key("Dir\\File.txt") == "DIR\\FILE.TXT"
    assert engine.relative_name("C:\\Sync\\Dir\\f.txt", "c:\\sync") == "Dir\\f.txt"
