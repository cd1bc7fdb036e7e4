"""
Movieclip - frame-based animation timeline controller.
Provides a playback head with looping, yoyo playback, frame labels and frame scripts.
"""

from .timeline import Timeline
from .models import FrameIndex, FrameLabel, FrameRef, InvalidArgument
from .config import TimelineConfig, get_preset, list_presets

__all__ = [
    'Timeline',
    'FrameIndex',
    'FrameLabel',
    'FrameRef',
    'InvalidArgument',
    'TimelineConfig',
    'get_preset',
    'list_presets',
]
