# tests/unit/core/test_exceptions.py
# Unit tests for exception hierarchy & error message formatting

from pathlib import Path

from pacer.core.exceptions import (
    PacerError,
    ConfigurationError,
    JSONParsingError,
    WorkoutParseError,
    PlaylistFormatError,
    FileOperationError,
    FileReadError,
    FileWriteError,
    format_error_message,
)


def test_format_error_message_basic():
    assert format_error_message("Workout Error", "bad xml") == "[red]Workout Error:[/] bad xml"


# * Test hierarchy relationships
class TestHierarchy:

    def test_everything_is_pacer_error(self):
        for cls in (
            ConfigurationError,
            JSONParsingError,
            WorkoutParseError,
            PlaylistFormatError,
            FileOperationError,
        ):
            assert issubclass(cls, PacerError)

    def test_file_errors(self):
        assert issubclass(FileReadError, FileOperationError)
        assert issubclass(FileWriteError, FileOperationError)


# * Test context attributes & repr
class TestAttributes:

    def test_file_error_path_coerced(self):
        error = FileReadError("missing", "a/b.json")
        assert error.path == Path("a/b.json")
        assert "a/b.json" in repr(error)

    def test_playlist_error_index(self):
        error = PlaylistFormatError("bad segment", index=3)
        assert error.index == 3
        assert repr(error) == "PlaylistFormatError('bad segment', index=3)"

