"""CLI entry point: python -m roundcast <snapshot.json>"""

import argparse
import json
import logging
import os
import sys
import time
import uuid
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console
from rich.live import Live

from roundcast.config import ConfigError, OverlayConfig, default_config, load_config
from roundcast.core.parser import SnapshotParser
from roundcast.core.telemetry import FrameRecorder
from roundcast.display import render
from roundcast.overview import OverlayFrame, compose_frame

logger = logging.getLogger("roundcast")

REFRESH_RATE = 0.5


def _resolve_config(path: Path | None) -> OverlayConfig:
    if path is None:
        env_path = os.environ.get("ROUNDCAST_CONFIG")
        if not env_path:
            return default_config()
        path = Path(env_path)
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    return load_config(path)


def _compose(parser: SnapshotParser, path: Path, config: OverlayConfig) -> OverlayFrame | None:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("%s: cannot read snapshot: %s", path, e)
        return None
    result = parser.parse(text)
    if not result.success:
        for e in result.errors:
            logger.error("%s: %s", path, e)
        return None
    return compose_frame(result.snapshot, config)


def _mtime(path: Path) -> float | None:
    """Modification time, or None while the game loop is replacing the file."""
    try:
        return path.stat().st_mtime
    except OSError:
        return None


def _watch(parser, path, config, recorder, console) -> None:
    frame = _compose(parser, path, config)
    last_mtime = _mtime(path)
    if frame is not None and recorder:
        recorder.record(frame, source=str(path))

    with Live(render(frame) if frame else "", console=console, refresh_per_second=4) as live:
        try:
            while True:
                mtime = _mtime(path)
                if mtime is None:
                    logger.debug("%s: snapshot missing, keeping last frame", path)
                elif mtime != last_mtime:
                    last_mtime = mtime
                    new_frame = _compose(parser, path, config)
                    # keep showing the last good frame on a bad write
                    if new_frame is not None:
                        frame = new_frame
                        live.update(render(frame))
                        if recorder:
                            recorder.record(frame, source=str(path))
                time.sleep(REFRESH_RATE)
        except KeyboardInterrupt:
            pass


def main() -> None:
    load_dotenv()

    parser = argparse.ArgumentParser(
        prog="roundcast",
        description="Preview the quiz overlay for a game-state snapshot",
    )
    parser.add_argument(
        "snapshot",
        type=Path,
        help="Path to snapshot JSON written by the game loop",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="Overlay YAML config (default: $ROUNDCAST_CONFIG or built-ins)",
    )
    parser.add_argument(
        "--watch",
        action="store_true",
        help="Re-render whenever the snapshot file changes",
    )
    parser.add_argument(
        "--record",
        type=Path,
        default=None,
        help="Directory to append composed frames to as JSONL",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the frame as JSON instead of the preview",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()
    if args.watch and args.json:
        parser.error("--json cannot be combined with --watch")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.snapshot.exists():
        print(f"Error: snapshot file not found: {args.snapshot}", file=sys.stderr)
        sys.exit(1)

    try:
        config = _resolve_config(args.config)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    snapshot_parser = SnapshotParser()
    recorder = None
    if args.record:
        recorder = FrameRecorder(args.record, f"session-{uuid.uuid4().hex[:8]}")

    console = Console()
    if args.watch:
        _watch(snapshot_parser, args.snapshot, config, recorder, console)
        return

    frame = _compose(snapshot_parser, args.snapshot, config)
    if frame is None:
        sys.exit(1)
    if recorder:
        recorder.record(frame, source=str(args.snapshot))

    if args.json:
        print(json.dumps(frame.to_dict(), indent=2, default=str))
    else:
        console.print(render(frame))
    if recorder:
        console.print(f"Frames: {recorder.file_path}")


if __name__ == "__main__":
    main()
