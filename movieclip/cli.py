"""
Movieclip CLI - Drive a timeline from the command line.

Entry points:
    movieclip     - Build a timeline, play it and tick it a fixed number of times

Each render prints one line, so the output is the sequence of frames the
playback head visits. The CLI is the external clock: it ticks as fast as it
can and never sleeps.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from .config import TimelineConfig, get_preset, list_presets
from .logging_config import configure_logging
from .timeline import Timeline

logger = logging.getLogger('movieclip.cli')


def validate_positive_int(value: str) -> int:
    """Validate positive integer."""
    try:
        num = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid integer: {value}")

    if num <= 0:
        raise argparse.ArgumentTypeError(f"Value must be positive, got: {num}")
    return num


def validate_non_negative_int(value: str) -> int:
    """Validate integer >= 0."""
    try:
        num = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid integer: {value}")

    if num < 0:
        raise argparse.ArgumentTypeError(f"Value must not be negative, got: {num}")
    return num


def parse_label(value: str) -> Tuple[str, int]:
    """Parse a NAME=FRAME label definition."""
    name, sep, frame = value.partition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"Label must look like NAME=FRAME, got: {value}")
    return name, validate_non_negative_int(frame)


def parse_frame(value: str):
    """Frame numbers stay ints, anything else is a label."""
    try:
        return int(value)
    except ValueError:
        return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="movieclip",
        description="Movieclip - Frame-based timeline playback",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  movieclip --frames 4 --ticks 8                  # Loop 4 frames
  movieclip --frames 4 --ticks 8 --yoyo           # Ping-pong
  movieclip --frames 10 --no-loop --ticks 20      # Play once, hold last frame
  movieclip --frames 10 --label in=0 --label out=5 --stop-at out
  movieclip --frames 5 --preset rewind --json     # One status object per line
        """,
    )

    timeline_group = parser.add_argument_group("Timeline")
    timeline_group.add_argument(
        "--frames", "-f", type=validate_positive_int, required=True, help="Total number of frames"
    )
    timeline_group.add_argument(
        "--config", "-c", type=Path, default=None, help="JSON config file (overrides --preset)"
    )
    timeline_group.add_argument(
        "--preset",
        "-p",
        choices=list_presets(),
        default="loop",
        help="Playback preset (default: loop)",
    )
    timeline_group.add_argument("--name", "-n", type=str, default=None, help="Timeline name")
    timeline_group.add_argument(
        "--fps", type=validate_positive_int, default=None, help="Frame rate, informational only"
    )
    timeline_group.add_argument(
        "--start", "-s", type=parse_frame, default=None, help="Frame or label to start playing at"
    )
    timeline_group.add_argument(
        "--loop-frame", type=parse_frame, default=None, help="Frame or label a forward loop resumes at"
    )
    timeline_group.add_argument("--no-loop", action="store_true", help="Hold at the ends instead of looping")
    timeline_group.add_argument("--reverse", action="store_true", help="Play backwards")
    timeline_group.add_argument("--yoyo", action="store_true", help="Bounce at the ends")

    script_group = parser.add_argument_group("Labels & Scripts")
    script_group.add_argument(
        "--label",
        "-l",
        type=parse_label,
        action="append",
        default=[],
        metavar="NAME=FRAME",
        help="Add a frame label (repeatable)",
    )
    script_group.add_argument(
        "--stop-at", type=parse_frame, default=None, help="Stop playback when this frame or label renders"
    )

    run_group = parser.add_argument_group("Run")
    run_group.add_argument(
        "--ticks", "-t", type=validate_non_negative_int, default=10, help="Number of ticks (default: 10)"
    )
    run_group.add_argument("--json", action="store_true", help="Print a JSON status object per render")
    run_group.add_argument(
        "--log-level", type=str, default=None, help="Log level (default: $MOVIECLIP_LOG_LEVEL or INFO)"
    )

    return parser


def build_config(args: argparse.Namespace) -> TimelineConfig:
    """Merge preset or config file with command-line overrides."""
    config = TimelineConfig.load(args.config) if args.config else get_preset(args.preset)

    config.total_frames = args.frames
    if args.name is not None:
        config.name = args.name
    if args.fps is not None:
        config.fps = args.fps
    if args.loop_frame is not None:
        config.loop_frame = args.loop_frame
    if args.no_loop:
        config.loop = False
    if args.reverse:
        config.reverse = True
    if args.yoyo:
        config.yoyo = True
    return config


def make_renderer(as_json: bool):
    """Build a frame renderer that prints one line per render."""

    def render(timeline: Timeline):
        if as_json:
            print(json.dumps(timeline.get_status()))
            return
        label = timeline.get_label_for_frame(timeline.current_frame)
        suffix = f" [{label}]" if label is not None else ""
        print(f"{timeline.current_frame}{suffix}")

    return render


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    config = build_config(args)
    timeline = Timeline.from_config(config, frame_renderer=make_renderer(args.json))

    for name, frame in args.label:
        timeline.add_label_to_frame(name, frame)

    if args.stop_at is not None:
        timeline.add_frame_script(args.stop_at, timeline.stop)

    start = args.start if args.start is not None else config.start_frame
    logger.debug(f"Playing {timeline!r} from {start!r} for {args.ticks} ticks")

    timeline.goto_and_play(start)
    for _ in range(args.ticks):
        timeline.tick()

    return 0


if __name__ == "__main__":
    sys.exit(main())
