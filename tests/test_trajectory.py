import numpy as np
import pytest

from orrery import NBodySimulation, TrajectoryRecorder


def test_recorder_collects_one_row_per_body_per_substep(circular_specs, quiet_config):
    sim = NBodySimulation.from_specs(circular_specs, quiet_config)
    rec = TrajectoryRecorder()

    sim.tick(1.0 / 60.0, on_substep=rec)

    assert len(rec) == 17 * 2
    df = rec.to_dataframe()
    assert list(df.columns) == TrajectoryRecorder.COLUMNS
    assert set(df["name"]) == {"Sun", "Planet"}
    assert df["time"].iloc[-1] == pytest.approx(sim.time)


def test_recorder_thins_by_every(circular_specs, quiet_config):
    sim = NBodySimulation.from_specs(circular_specs, quiet_config)
    rec = TrajectoryRecorder(every=2)
    sim.run(10, on_substep=rec)
    assert len(rec) == 5 * 2


def test_positions_of_matches_final_state(circular_specs, quiet_config):
    sim = NBodySimulation.from_specs(circular_specs, quiet_config)
    rec = TrajectoryRecorder()
    sim.run(8, on_substep=rec)

    track = rec.positions_of("Planet")
    assert track.shape == (8, 3)
    np.testing.assert_array_equal(track[-1], sim.body("Planet").position)
    assert rec.positions_of("Nobody").shape == (0, 3)


def test_empty_recorder_has_columns():
    rec = TrajectoryRecorder()
    df = rec.to_dataframe()
    assert df.empty
    assert list(df.columns) == TrajectoryRecorder.COLUMNS


def test_clear_and_bad_every(capsys, circular_specs, quiet_config):
    rec = TrajectoryRecorder(every=0)
    assert rec.every == 1
    assert "[warning]" in capsys.readouterr().out

    sim = NBodySimulation.from_specs(circular_specs, quiet_config)
    rec.record(sim)
    assert len(rec) == 2
    rec.clear()
    assert len(rec) == 0
