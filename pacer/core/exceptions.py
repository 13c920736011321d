# pacer/core/exceptions.py
# Custom exception hierarchy for pacer (pure - no I/O operations)
# ! The playback timer itself never raises; these cover file, config & parsing layers

from pathlib import Path


# * Format error message for display (pure string formatting, no I/O)
def format_error_message(error_type: str, message: str) -> str:
    return f"[red]{error_type}:[/] {message}"


# * Base exception for pacer
class PacerError(Exception):
    pass


# * Configuration errors
class ConfigurationError(PacerError):
    pass


# * JSON parsing errors
class JSONParsingError(PacerError):
    pass


# * Workout file could not be parsed (malformed XML, wrong root element)
class WorkoutParseError(PacerError):
    pass


# * Playlist or catalog JSON has the wrong shape
class PlaylistFormatError(PacerError):
    def __init__(self, message: str, index: int | None = None):
        super().__init__(message)
        self.index = index

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, index={self.index!r})"


# * Base error for file I/O operations
class FileOperationError(PacerError):
    def __init__(self, message: str, path: Path | str):
        super().__init__(message)
        self.path = Path(path) if isinstance(path, str) else path

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, path={self.path!r})"


# * Failed to read file
class FileReadError(FileOperationError):
    pass


# * Failed to write file
class FileWriteError(FileOperationError):
    pass
