# pacer/pacer_io/zwo.py
# Parser for Zwift .zwo workout files (XML) into Workout models

from __future__ import annotations

import zlib
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Callable

from ..core.exceptions import FileReadError, WorkoutParseError
from ..core.verbose import vlog_file_read, vlog_workout
from ..core.workout import BlockKind, TextEvent, Workout, WorkoutBlock

ROOT_TAG = "workout_file"


def _int_attr(element: ET.Element, name: str) -> int | None:
    raw = element.get(name)
    if raw is None:
        return None
    try:
        return int(raw.strip())
    except ValueError:
        return None


def _float_attr(element: ET.Element, name: str) -> float:
    raw = element.get(name)
    if raw is None:
        return 0.0
    try:
        return float(raw.strip())
    except ValueError:
        return 0.0


def _text(root: ET.Element, tag: str) -> str:
    node = root.find(tag)
    if node is None or node.text is None:
        return ""
    return node.text.strip()


# ramp blocks share the same attribute layout
def _parse_ramp(element: ET.Element, kind: BlockKind) -> WorkoutBlock:
    return WorkoutBlock(
        kind=kind,
        duration=_int_attr(element, "Duration") or 0,
        power_low=_float_attr(element, "PowerLow"),
        power_high=_float_attr(element, "PowerHigh"),
        cadence=_int_attr(element, "Cadence"),
    )


def _parse_warmup(element: ET.Element) -> WorkoutBlock:
    return _parse_ramp(element, BlockKind.WARMUP)


def _parse_cooldown(element: ET.Element) -> WorkoutBlock:
    return _parse_ramp(element, BlockKind.COOLDOWN)


def _parse_steady_state(element: ET.Element) -> WorkoutBlock:
    power = _float_attr(element, "Power")
    messages = tuple(
        TextEvent(
            time_offset=_int_attr(event, "timeoffset") or 0,
            message=event.get("message", ""),
        )
        for event in element.iter("textevent")
    )
    return WorkoutBlock(
        kind=BlockKind.STEADY,
        duration=_int_attr(element, "Duration") or 0,
        power_low=power,
        power_high=power,
        cadence=_int_attr(element, "Cadence"),
        messages=messages,
    )


_BLOCK_PARSERS: dict[str, Callable[[ET.Element], WorkoutBlock]] = {
    "Warmup": _parse_warmup,
    "SteadyState": _parse_steady_state,
    "Cooldown": _parse_cooldown,
}


# * Parse .zwo XML text; unknown block tags are skipped
def parse_zwo(source: str | bytes) -> Workout:
    try:
        root = ET.fromstring(source)
    except ET.ParseError as e:
        raise WorkoutParseError(f"Malformed workout XML: {e}")

    if root.tag != ROOT_TAG:
        raise WorkoutParseError(
            f"Expected <{ROOT_TAG}> root element, found <{root.tag}>"
        )

    name = _text(root, "name")
    blocks: list[WorkoutBlock] = []
    workout = root.find("workout")
    if workout is not None:
        for element in workout:
            parser = _BLOCK_PARSERS.get(element.tag)
            if parser is None:
                vlog_workout(f"Skipping unsupported block <{element.tag}>")
                continue
            blocks.append(parser(element))

    return Workout(
        # stable across runs, unlike hash()
        id=str(zlib.crc32(name.encode("utf-8"))),
        name=name,
        author=_text(root, "author"),
        description=_text(root, "description"),
        blocks=tuple(blocks),
        total_duration=sum(b.duration for b in blocks),
    )


# * Read & parse a .zwo file from disk
def read_workout(path: Path) -> Workout:
    try:
        data = Path(path).read_bytes()
    except FileNotFoundError:
        raise FileReadError(f"Workout file not found: {path}", path)
    except OSError as e:
        raise FileReadError(f"Could not read {path}: {e}", path)
    vlog_file_read(Path(path), len(data))
    return parse_zwo(data)
