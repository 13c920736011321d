# pacer/core/demo.py
# Canned demo playlist: three consecutive 60-second tracks

from __future__ import annotations

from .types import Segment

DEMO_SEGMENT_MS = 60_000


# * Demo workout w/ fixed Spotify URIs; handy as a test fixture & for `pacer run --demo`
def demo_segments() -> tuple[Segment, ...]:
    return (
        Segment(
            uri="spotify:track:1301WleyT98MSxVHnAlFYp",
            start_ms=0,
            end_ms=DEMO_SEGMENT_MS,
            label="Warmup - Blinding Lights",
        ),
        Segment(
            uri="spotify:track:0VjIjW4GlUZAMYd2vXMwbU",
            start_ms=DEMO_SEGMENT_MS,
            end_ms=2 * DEMO_SEGMENT_MS,
            label="Main - Levitating",
        ),
        Segment(
            uri="spotify:track:4cOdK2wGLETKBW3PvgPWqLv",
            start_ms=2 * DEMO_SEGMENT_MS,
            end_ms=3 * DEMO_SEGMENT_MS,
            label="Cool Down - One Kiss",
        ),
    )
