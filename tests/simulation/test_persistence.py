"""Tests for trajectory persistence (TrajectoryWriter)."""

from __future__ import annotations

from pathlib import Path
from random import Random

import pyarrow.parquet as pq
import pytest

from zombie_escape.domain.grid import Direction
from zombie_escape.generation.level import initialize_level
from zombie_escape.io.schemas import TRAJECTORY_SCHEMA
from zombie_escape.simulation.controller import request_move
from zombie_escape.simulation.persistence import TrajectoryWriter


class TestTrajectoryWriter:
    def test_writes_player_and_adversary_rows(self, tmp_path: Path) -> None:
        path = tmp_path / "trajectories.parquet"
        rng = Random(0)
        state = initialize_level(2, rng=rng)
        with TrajectoryWriter(path) as writer:
            writer.record("run_a", state)
            state, _ = request_move(state, Direction.LEFT, rng=rng)
            writer.record("run_a", state)
        table = pq.read_table(path)
        assert table.schema.equals(TRAJECTORY_SCHEMA)
        assert table.num_rows == 2 * (1 + len(state.adversaries))
        actors = table.column("actor").to_pylist()
        assert actors.count("player") == 2

    def test_small_threshold_flushes_in_batches(self, tmp_path: Path) -> None:
        path = tmp_path / "trajectories.parquet"
        state = initialize_level(1, rng=Random(4))
        with TrajectoryWriter(path, flush_threshold=1) as writer:
            for run in range(3):
                writer.record(f"run_{run}", state)
        table = pq.read_table(path)
        assert sorted(set(table.column("run_id").to_pylist())) == ["run_0", "run_1", "run_2"]

    def test_no_rows_writes_no_file(self, tmp_path: Path) -> None:
        path = tmp_path / "trajectories.parquet"
        with TrajectoryWriter(path):
            pass
        assert not path.exists()

    def test_rejects_bad_threshold(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="flush_threshold"):
            TrajectoryWriter(tmp_path / "t.parquet", flush_threshold=0)

    def test_flush_with_empty_buffers_is_noop(self, tmp_path: Path) -> None:
        path = tmp_path / "t.parquet"
        writer = TrajectoryWriter(path)
        writer.flush()
        assert not path.exists()
        writer.close()

    def test_record_after_close_raises_and_keeps_rows(self, tmp_path: Path) -> None:
        path = tmp_path / "trajectories.parquet"
        state = initialize_level(1, rng=Random(2))
        writer = TrajectoryWriter(path)
        writer.record("run_a", state)
        writer.close()
        assert writer.closed

        with pytest.raises(ValueError, match="TrajectoryWriter is closed"):
            writer.record("run_b", state)
        with pytest.raises(ValueError, match="TrajectoryWriter is closed"):
            writer.flush()
        writer.close()

        assert set(pq.read_table(path).column("run_id").to_pylist()) == {"run_a"}
