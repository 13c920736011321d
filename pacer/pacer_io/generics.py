# pacer/pacer_io/generics.py
# Generic utilities for pacer IO operations & filesystem helpers

from pathlib import Path
from typing import Any, Union
import json

from ..core.verbose import vlog_file_read, vlog_file_write


def ensure_parent(path: Union[Path, str]) -> None:
    # create parent directories for any file path
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)


# write JSON w/ UTF-8 encoding, creating parent dirs as needed
def write_json_safe(obj: Any, path: Path) -> None:
    from ..core.exceptions import FileWriteError

    ensure_parent(path)
    content = json.dumps(obj, indent=2)
    try:
        Path(path).write_text(content, encoding="utf-8")
    except OSError as e:
        raise FileWriteError(f"Could not write {path}: {e}", path)
    vlog_file_write(Path(path), len(content))


# read JSON w/ UTF-8 encoding
def read_json_safe(path: Path) -> Any:
    from ..core.exceptions import JSONParsingError, FileReadError

    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        raise FileReadError(f"File not found: {path}", path)
    except OSError as e:
        raise FileReadError(f"Could not read {path}: {e}", path)
    vlog_file_read(Path(path), len(text))
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        # create a trimmed snippet of the offending JSON for the error message
        lines = text.split("\n")
        # JSONDecodeError uses 1-based line numbers
        line_num = e.lineno - 1
        snippet_start = max(0, line_num - 2)
        snippet_end = min(len(lines), line_num + 3)

        numbered_lines = []
        for i, line in enumerate(lines[snippet_start:snippet_end], start=snippet_start + 1):
            marker = ">>> " if i == e.lineno else "    "
            numbered_lines.append(f"{marker}{i:3}: {line}")

        snippet = "\n".join(numbered_lines)
        raise JSONParsingError(f"Invalid JSON in {path}:\n{snippet}\nError: {e.msg}")
