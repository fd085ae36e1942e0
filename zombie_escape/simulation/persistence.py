"""Buffered Parquet persistence for turn-by-turn trajectories."""

from __future__ import annotations

from pathlib import Path
from types import TracebackType

import pyarrow as pa
import pyarrow.parquet as pq

from zombie_escape.config.constants import FLUSH_THRESHOLD
from zombie_escape.domain.state import GameState
from zombie_escape.io.schemas import TRAJECTORY_SCHEMA


class TrajectoryWriter:
    """Append player and adversary positions per turn, flushing in batches.

    Use as a context manager so the Parquet footer is always written. A closed
    writer cannot be reused: reopening the path would truncate the file.
    """

    def __init__(self, path: Path, flush_threshold: int = FLUSH_THRESHOLD) -> None:
        if flush_threshold < 1:
            raise ValueError("flush_threshold must be >= 1")
        self.path = Path(path)
        self.flush_threshold = flush_threshold
        self._columns: dict[str, list[int | str]] = {name: [] for name in TRAJECTORY_SCHEMA.names}
        self._writer: pq.ParquetWriter | None = None
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def _ensure_open(self) -> None:
        if self._closed:
            raise ValueError("TrajectoryWriter is closed")

    def record(self, run_id: str, state: GameState) -> None:
        """Buffer one row for the player and one per adversary at ``state.move_count``."""
        self._ensure_open()
        actors = [("player", 0, state.player)]
        actors += [("adversary", i, pos) for i, pos in enumerate(state.adversaries)]
        for actor, index, (row, col) in actors:
            self._columns["run_id"].append(run_id)
            self._columns["turn"].append(state.move_count)
            self._columns["actor"].append(actor)
            self._columns["actor_index"].append(index)
            self._columns["row"].append(row)
            self._columns["col"].append(col)
        if len(self._columns["run_id"]) >= self.flush_threshold:
            self.flush()

    def flush(self) -> None:
        """Write buffered rows as one row group; the file is created lazily."""
        self._ensure_open()
        if not self._columns["run_id"]:
            return
        if self._writer is None:
            self._writer = pq.ParquetWriter(self.path, TRAJECTORY_SCHEMA)
        self._writer.write_table(pa.Table.from_pydict(self._columns, schema=TRAJECTORY_SCHEMA))
        for values in self._columns.values():
            values.clear()

    def close(self) -> None:
        if self._closed:
            return
        self.flush()
        if self._writer is not None:
            self._writer.close()
            self._writer = None
        self._closed = True

    def __enter__(self) -> TrajectoryWriter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
