# pacer/cli/decorators.py
# CLI decorator for mapping pacer errors to friendly Rich output & exit codes

import functools
from typing import Callable, TypeVar, Any, cast

from ..core.exceptions import (
    PacerError,
    ConfigurationError,
    JSONParsingError,
    WorkoutParseError,
    PlaylistFormatError,
    FileOperationError,
    format_error_message,
)

F = TypeVar("F", bound=Callable[..., Any])


# * Decorator for handling pacer errors in CLI commands w/ Rich output
def handle_pacer_error(func: F) -> F:
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        # ! Lazy import to avoid circular dependencies
        from ..pacer_io.console import console

        try:
            return func(*args, **kwargs)
        except JSONParsingError as e:
            console.print(format_error_message("JSON Parsing Error", str(e)))
            raise SystemExit(1)
        except WorkoutParseError as e:
            console.print(format_error_message("Workout Error", str(e)))
            raise SystemExit(1)
        except PlaylistFormatError as e:
            console.print(format_error_message("Playlist Error", str(e)))
            raise SystemExit(1)
        except ConfigurationError as e:
            console.print(format_error_message("Configuration Error", str(e)))
            raise SystemExit(1)
        except FileOperationError as e:
            console.print(format_error_message("File Error", str(e)))
            raise SystemExit(1)
        except PacerError as e:
            console.print(format_error_message("Error", str(e)))
            raise SystemExit(1)

    return cast(F, wrapper)
