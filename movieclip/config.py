"""
Movieclip Configuration - Timeline construction settings.

Provides:
- Playback presets (loop, once, pingpong, rewind)
- A type-safe configuration dataclass
- Loading from JSON/environment
"""

import json
import os
from dataclasses import asdict, dataclass, replace
from pathlib import Path
from typing import Dict, List, Optional, Union


@dataclass
class TimelineConfig:
    """Construction-time settings for a Timeline."""

    fps: int = 30  # Advisory only, the caller's clock drives tick()
    start_frame: int = 0
    total_frames: int = 0

    # Playback mode
    loop: bool = True
    loop_frame: Union[int, str] = 0  # Frame or label a forward loop resumes at
    reverse: bool = False
    yoyo: bool = False

    # Mostly for debugging
    name: str = ""

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "TimelineConfig":
        """Create from dictionary, ignoring unknown keys."""
        return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})

    @classmethod
    def from_env(cls, prefix: str = "MOVIECLIP_") -> "TimelineConfig":
        """Load configuration from environment variables."""
        defaults = cls()
        loop_frame = os.environ.get(f"{prefix}LOOP_FRAME", str(defaults.loop_frame))
        return cls(
            fps=int(os.environ.get(f"{prefix}FPS", str(defaults.fps))),
            start_frame=int(os.environ.get(f"{prefix}START_FRAME", str(defaults.start_frame))),
            total_frames=int(os.environ.get(f"{prefix}TOTAL_FRAMES", str(defaults.total_frames))),
            loop=_env_bool(f"{prefix}LOOP", defaults.loop),
            loop_frame=_frame_or_label(loop_frame),
            reverse=_env_bool(f"{prefix}REVERSE", defaults.reverse),
            yoyo=_env_bool(f"{prefix}YOYO", defaults.yoyo),
            name=os.environ.get(f"{prefix}NAME", defaults.name),
        )

    @classmethod
    def load(cls, path: Path) -> "TimelineConfig":
        """Load configuration from JSON file, defaults if it does not exist."""
        if not path.exists():
            return cls()

        with open(path) as f:
            data = json.load(f)

        return cls.from_dict(data)


def _frame_or_label(value: str) -> Union[int, str]:
    """Frame numbers become ints, anything else is a label."""
    try:
        return int(value)
    except ValueError:
        return value


def _env_bool(key: str, default: bool) -> bool:
    value = os.environ.get(key)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# Common playback modes
PRESETS: Dict[str, TimelineConfig] = {
    "loop": TimelineConfig(loop=True),
    "once": TimelineConfig(loop=False),
    "pingpong": TimelineConfig(loop=True, yoyo=True),
    "rewind": TimelineConfig(loop=True, reverse=True),
}


def get_preset(name: str) -> TimelineConfig:
    """Get a copy of a preset by name, returns 'loop' if not found."""
    return replace(PRESETS.get(name.lower(), PRESETS["loop"]))


def list_presets() -> List[str]:
    """List available preset names."""
    return list(PRESETS.keys())


def load_config(path: Optional[Path] = None) -> TimelineConfig:
    """Load configuration from a JSON file, or from the environment when no path is given."""
    if path is None:
        return TimelineConfig.from_env()
    return TimelineConfig.load(path)
