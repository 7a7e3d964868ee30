"""Tests for the simulation runner loop."""
import io
import pytest
import numpy as np
from bounce.params import SimulationParameters
from bounce.types import ExecutionMode
from pipeline.config import SimulationConfig
from pipeline.error_handler import ConfigurationError, FileOperationError, PhysicsEngineError
from pipeline.output_handler import SimulationOutputHandler
from pipeline.run_simulation import SimulationProfiler, SimulationRunner, TrajectoryCollector
from pipeline.scene_builder import SceneBuilder


def make_runner(scene, steps=10, params=None, stream=None, **kwargs):
    config = SimulationConfig(
        mode=kwargs.pop('mode', ExecutionMode.PURE),
        steps=steps,
        parameters=params or SimulationParameters(),
        enable_profiling=kwargs.pop('enable_profiling', False),
        collect_trajectory=kwargs.pop('collect_trajectory', False)
    )
    handler = SimulationOutputHandler(stream=stream or io.StringIO(), verbose=False)
    return SimulationRunner(config, scene, output_handler=handler, **kwargs)


def test_prints_one_line_per_step_before_integrating(default_scene):
    stream = io.StringIO()
    runner = make_runner(default_scene, steps=5, stream=stream)
    final_state, metrics = runner.run()

    lines = stream.getvalue().splitlines()
    assert len(lines) == 5
    assert lines[0] == "0 0 0 7.86 0.87 0 1.32"
    assert lines[4].split()[0] == "0.04"
    assert metrics['num_steps'] == 5
    assert metrics['simulated_time'] == pytest.approx(0.05)
    assert np.allclose(final_state['x'][0], [0.87 * 0.05, 0.0, 7.86 + 1.32 * 0.05])


def test_quiet_run_prints_nothing(default_scene):
    stream = io.StringIO()
    make_runner(default_scene, steps=5, stream=stream, print_steps=False).run()
    assert stream.getvalue() == ""


def test_csv_frames_written_per_step(tmp_path, default_scene):
    make_runner(default_scene, steps=3, csv_dir=tmp_path).run()
    assert sorted(p.name for p in tmp_path.iterdir()) == ["data-0.csv", "data-1.csv", "data-2.csv"]


def test_csv_write_failure(tmp_path, default_scene):
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    with pytest.raises(FileOperationError):
        make_runner(default_scene, steps=2, csv_dir=blocker).run()


def test_trajectory_and_profiling(default_scene):
    runner = make_runner(default_scene, steps=4, collect_trajectory=True, enable_profiling=True)
    _, metrics = runner.run()
    trajectory = runner.get_trajectory()

    assert trajectory.shape == (5, 1, 3)
    assert np.array_equal(trajectory[0, 0], [0.0, 0.0, 7.86])
    assert metrics['trajectory_collected']
    assert set(metrics['profile_data']) == {'avg_step_time', 'min_step_time', 'max_step_time', 'std_step_time'}


def test_diverging_run_raises_physics_engine_error():
    scene = SceneBuilder().add_body([1.0, 0.0, 0.1], mass=1.0, radius=0.16).build()
    params = SimulationParameters(stiffness=1e12)
    with np.errstate(over='ignore', invalid='ignore'):
        with pytest.raises(PhysicsEngineError):
            make_runner(scene, steps=500, params=params).run()


def test_invalid_scene_raises_configuration_error(default_scene):
    scene = dict(default_scene, mass=np.array([-1.0]))
    with pytest.raises(ConfigurationError):
        make_runner(scene)


def test_collectors_disabled():
    collector = TrajectoryCollector(collect=False)
    collector.add_frame({'x': np.zeros((1, 3))})
    assert collector.get_result() is None
    profiler = SimulationProfiler(enabled=False)
    profiler.record_step_time(0.1)
    assert profiler.get_profile_data() is None


def test_energy_reported_in_metrics(default_scene):
    _, metrics = make_runner(default_scene, steps=5).run()
    kinetic = 0.5 * 1.23 * (0.87 ** 2 + 1.32 ** 2)
    # Free flight with no gravity conserves energy exactly
    assert metrics['initial_energy'] == pytest.approx(kinetic)
    assert metrics['final_energy'] == pytest.approx(kinetic)
