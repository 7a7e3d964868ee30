"""Tests for CLI parsing and the configuration dataclasses."""
import pytest
from pathlib import Path
from bounce.params import SimulationParameters
from bounce.types import ExecutionMode
from pipeline.cli_parser import create_argument_parser
from pipeline.config import OutputConfig, SceneConfig, SimulationConfig
from pipeline.error_handler import ConfigurationError


def parse(*argv):
    return create_argument_parser().parse_args(list(argv))


def test_defaults_reproduce_reference_run():
    args = parse()
    sim = SimulationConfig.from_args(args)
    out = OutputConfig.from_args(args)
    scene = SceneConfig.from_args(args)

    assert sim.mode == ExecutionMode.PURE
    assert sim.steps == 1000
    assert sim.parameters == SimulationParameters()
    assert not sim.enable_profiling
    assert not sim.collect_trajectory
    assert out.final_state_output == Path("datos.txt")
    assert out.csv_dir is None
    assert out.print_steps
    assert out.report_status
    assert scene == SceneConfig()


def test_overrides():
    args = parse("--mode", "tensor", "--steps", "10", "--gravity", "9.81", "--lx-min", "-1",
                 "--position", "0", "0", "2", "--mass", "3", "--csv-dir", "frames",
                 "--trajectory-output", "traj.npy", "--quiet", "--profile", "--no-summary")
    sim = SimulationConfig.from_args(args)
    out = OutputConfig.from_args(args)
    scene = SceneConfig.from_args(args)

    assert sim.mode == ExecutionMode.TENSOR
    assert sim.steps == 10
    assert sim.parameters.gravity == 9.81
    assert sim.parameters.lx_min == -1.0
    assert sim.parameters.dt == 0.01
    assert sim.enable_profiling
    assert sim.collect_trajectory
    assert out.csv_dir == Path("frames")
    assert out.trajectory_output == Path("traj.npy")
    assert not out.print_steps
    assert not out.report_status
    assert scene.position == (0.0, 0.0, 2.0)
    assert scene.mass == 3.0
    assert scene.velocity is None


@pytest.mark.parametrize("argv", [
    ("--dt", "0"),
    ("--steps", "-1"),
    ("--lx", "-2"),
    ("--damping", "-0.5"),
])
def test_invalid_values_raise_configuration_error(argv):
    with pytest.raises(ConfigurationError):
        SimulationConfig.from_args(parse(*argv))


def test_unknown_mode_rejected_by_parser():
    with pytest.raises(SystemExit):
        parse("--mode", "wgpu")
