"""
Timeline (movieclip) playback head.
Handles frame navigation, directional/looping/yoyo playback, labels and frame scripts.
"""

import logging
from typing import TYPE_CHECKING, Any, Callable, Dict, Optional

from .models import FrameIndex, FrameLabel, FrameLike, InvalidArgument, as_frame_ref

if TYPE_CHECKING:
    from .config import TimelineConfig

logger = logging.getLogger('movieclip.timeline')

FrameScript = Callable[[], None]


class Timeline:
    """
    Frame-based playback head over `total_frames` discrete frames.

    Nothing here keeps time: call tick() once per external time step
    (e.g., every display refresh) to advance the head by one frame.
    Drawing is delegated to `frame_renderer`, which receives the timeline.
    """

    def __init__(
        self,
        fps: int = 30,
        frame_renderer: Optional[Callable[['Timeline'], None]] = None,
        frames_provider: Any = None,
        loop: bool = True,
        loop_frame: FrameLike = 0,
        name: str = '',
        reverse: bool = False,
        start_frame: int = 0,
        total_frames: int = 0,
        yoyo: bool = False,
    ):
        self._is_playing: bool = False
        self._should_render: bool = False
        self._frame_scripts: Dict[int, FrameScript] = {}
        self._labels: Dict[str, int] = {}

        self.total_frames: int = total_frames
        self.current_frame: int = self.validate_frame(start_frame)

        # Stored for callers, never used for timing
        self.fps: int = fps

        self.frame_renderer = frame_renderer

        # Opaque reference to whatever supplies the frames;
        # keep total_frames in sync with it
        self.frames_provider = frames_provider

        self.loop: bool = loop
        # Where a forward, non-yoyo loop resumes
        self.loop_frame: FrameLike = loop_frame
        self.name: str = name
        self.reverse: bool = reverse
        self.yoyo: bool = yoyo

    @classmethod
    def from_config(
        cls,
        config: "TimelineConfig",
        frame_renderer: Optional[Callable[['Timeline'], None]] = None,
        frames_provider: Any = None,
    ) -> 'Timeline':
        """Create a timeline from a TimelineConfig."""
        return cls(
            fps=config.fps,
            frame_renderer=frame_renderer,
            frames_provider=frames_provider,
            loop=config.loop,
            loop_frame=config.loop_frame,
            name=config.name,
            reverse=config.reverse,
            start_frame=config.start_frame,
            total_frames=config.total_frames,
            yoyo=config.yoyo,
        )

    def __repr__(self) -> str:
        state = "playing" if self._is_playing else "stopped"
        return f"<Timeline {self.name!r} frame={self.current_frame}/{self.total_frames} {state}>"

    @property
    def is_playing(self) -> bool:
        return self._is_playing

    @property
    def should_render(self) -> bool:
        return self._should_render

    @property
    def labels(self) -> Dict[str, int]:
        return dict(self._labels)

    @property
    def frame_scripts(self) -> Dict[int, FrameScript]:
        return dict(self._frame_scripts)

    # === Navigation ===

    def validate_frame(self, frame: FrameLike) -> int:
        """
        Resolve `frame` to a usable frame index.

        Labels resolve through the registered labels, unknown labels to 0.
        Indices are clamped into [0, total_frames - 1], and to 0 when the
        timeline has no frames at all.
        """
        ref = as_frame_ref(frame)

        if isinstance(ref, FrameLabel):
            return self._labels.get(ref.name, 0)

        return max(0, min(ref.index, self.total_frames - 1))

    def goto_and_play(self, frame: FrameLike):
        """Move the head to `frame` and start playing."""
        self.current_frame = self.validate_frame(frame)
        logger.debug(
            f"[{self.name}] goto_and_play {frame!r} -> {self.current_frame}",
            extra={"timeline": self.name, "frame": self.current_frame},
        )
        self.play()

    def goto_and_stop(self, frame: FrameLike):
        """Move the head to `frame`, render it once and stop there."""
        self.current_frame = self.validate_frame(frame)
        logger.debug(
            f"[{self.name}] goto_and_stop {frame!r} -> {self.current_frame}",
            extra={"timeline": self.name, "frame": self.current_frame},
        )
        self.render()
        self.stop()

    def play(self):
        """Start playing from current_frame."""
        self.render()
        self._is_playing = True
        self.start_rendering()

    def stop(self):
        """Stop playing at current_frame."""
        self._is_playing = False
        self.stop_rendering()

    def start_rendering(self):
        """Let tick() call the renderer and frame scripts."""
        self._should_render = True

    def stop_rendering(self):
        """Keep advancing on tick() without rendering or firing frame scripts."""
        self._should_render = False

    def render(self):
        """Render current_frame, then fire its frame script if there is one."""
        if callable(self.frame_renderer):
            self.frame_renderer(self)

        script = self._frame_scripts.get(self.current_frame)
        if script is not None:
            script()

    def tick(self):
        """
        Advance the head by one frame. Call this once per external time step.

        At a boundary the head wraps when looping (to loop_frame going
        forward, to the last frame going backward), bounces and flips
        direction under yoyo, and stays put otherwise. Playback is never
        stopped automatically.
        """
        if not self._is_playing:
            return

        if self.total_frames <= 0:
            return

        if self.reverse:
            if self.current_frame - 1 < 0:
                if self.loop:
                    if self.yoyo:
                        self.current_frame = self.validate_frame(self.current_frame + 1)
                        self.reverse = False
                    else:
                        self.current_frame = self.total_frames - 1
                else:
                    logger.debug(f"[{self.name}] holding at first frame")
            else:
                self.current_frame -= 1
        else:
            if self.current_frame + 1 > self.total_frames - 1:
                if self.loop:
                    if self.yoyo:
                        self.current_frame = self.validate_frame(self.current_frame - 1)
                        self.reverse = True
                    else:
                        self.current_frame = self.validate_frame(self.loop_frame)
                else:
                    logger.debug(f"[{self.name}] holding at last frame")
            else:
                self.current_frame += 1

        if self._should_render:
            self.render()

    # === Frame scripts ===

    def add_frame_script(self, frame: FrameLike, callback: Optional[FrameScript]):
        """
        Register `callback` to run whenever `frame` is rendered.

        A frame holds at most one script; registering again replaces it.
        Passing None removes the frame's script.
        """
        frame = self.validate_frame(frame)

        if callback is None:
            self.remove_frame_script(frame)
            return

        self._frame_scripts[frame] = callback
        logger.debug(f"[{self.name}] frame script set on frame {frame}")

    def remove_frame_script(self, frame: FrameLike):
        """Remove the script for `frame`, if any."""
        frame = self.validate_frame(frame)
        if self._frame_scripts.pop(frame, None) is not None:
            logger.debug(f"[{self.name}] frame script removed from frame {frame}")

    # === Labels ===

    def add_label_to_frame(self, label: str, frame: FrameLike):
        """Name `frame` as `label`. Re-adding a label moves it."""
        if isinstance(frame, (str, FrameLabel)):
            raise InvalidArgument("frame parameter must not be a string")

        frame = self.validate_frame(frame)

        if not isinstance(label, str):
            raise InvalidArgument("label parameter is not a string")

        self._labels[label] = frame
        logger.debug(f"[{self.name}] label {label!r} -> frame {frame}")

    def remove_label_from_frame(self, label: str):
        """Forget `label`; unknown labels are ignored."""
        self._labels.pop(label, None)

    def get_label_for_frame(self, frame: FrameLike) -> Optional[str]:
        """
        Get the label of the section `frame` belongs to.

        That is the label on the greatest frame <= `frame`. When several
        labels share that frame, the one added first wins.
        """
        frame = self.validate_frame(frame)

        nearest_label = None
        nearest_frame = -1
        for label, frame_start in self._labels.items():
            if frame >= frame_start and frame_start > nearest_frame:
                nearest_label = label
                nearest_frame = frame_start

        return nearest_label

    # === Status ===

    def get_status(self) -> Dict[str, Any]:
        """Get current timeline status for display or broadcasting."""
        loop_frame = self.loop_frame
        if isinstance(loop_frame, FrameIndex):
            loop_frame = loop_frame.index
        elif isinstance(loop_frame, FrameLabel):
            loop_frame = loop_frame.name

        return {
            "name": self.name,
            "current_frame": self.current_frame,
            "total_frames": self.total_frames,
            "fps": self.fps,
            "loop": self.loop,
            "loop_frame": loop_frame,
            "reverse": self.reverse,
            "yoyo": self.yoyo,
            "playing": self._is_playing,
            "rendering": self._should_render,
            "label": self.get_label_for_frame(self.current_frame),
            "labels": dict(self._labels),
        }
