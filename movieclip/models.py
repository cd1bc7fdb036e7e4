"""
Data models for the movieclip timeline.
"""

from dataclasses import dataclass
from typing import Union


class InvalidArgument(ValueError):
    """Raised when a timeline method receives an argument it cannot accept."""


@dataclass(frozen=True)
class FrameIndex:
    """A concrete frame number."""
    index: int


@dataclass(frozen=True)
class FrameLabel:
    """A named frame, resolved through the timeline's labels."""
    name: str


FrameRef = Union[FrameIndex, FrameLabel]

# Anything the public timeline API accepts where a frame is expected
FrameLike = Union[int, str, FrameIndex, FrameLabel]


def as_frame_ref(frame: FrameLike) -> FrameRef:
    """
    Convert a plain int or str into a FrameRef.

    FrameRef values pass through unchanged. Booleans are rejected even
    though they are ints, since `goto_and_play(True)` is almost always a bug.
    """
    if isinstance(frame, (FrameIndex, FrameLabel)):
        return frame
    if isinstance(frame, bool):
        raise InvalidArgument(f"frame must be an int or a label, got bool: {frame!r}")
    if isinstance(frame, int):
        return FrameIndex(frame)
    if isinstance(frame, str):
        return FrameLabel(frame)
    raise InvalidArgument(f"frame must be an int or a label, got {type(frame).__name__}")
