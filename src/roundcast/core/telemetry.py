"""FrameRecorder — JSONL log of composed overlay frames.

One recorder per session. Writes one JSONL line per frame. The projection
core never writes anything itself; the CLI opts in with ``--record``.
"""

import json
from datetime import datetime, timezone
from pathlib import Path

import roundcast
from roundcast.overview import OverlayFrame

_SCHEMA_VERSION = "1.0.0"


class FrameRecorder:
    """Writes JSONL frames for a single overlay session."""

    def __init__(self, output_dir: Path, session_id: str):
        self._output_dir = Path(output_dir)
        self._session_id = session_id
        self._output_dir.mkdir(parents=True, exist_ok=True)
        self._file_path = self._output_dir / f"{session_id}.jsonl"
        self._frame_count = 0

    @property
    def file_path(self) -> Path:
        return self._file_path

    @property
    def frame_count(self) -> int:
        return self._frame_count

    def record(self, frame: OverlayFrame, source: str | None = None) -> None:
        self._frame_count += 1
        record = {
            "schema_version": _SCHEMA_VERSION,
            "record_type": "frame",
            "session_id": self._session_id,
            "frame_id": self._frame_count,
            "engine_version": roundcast.__version__,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "source": source,
            "frame": frame.to_dict(),
        }
        self._append(record)

    def _append(self, record: dict) -> None:
        with open(self._file_path, "a") as f:
            f.write(json.dumps(record, default=str) + "\n")
