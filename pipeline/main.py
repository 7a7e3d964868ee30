#!/usr/bin/env python3
"""Command-line entry point.

Pipeline: parse args → build scene → run simulation (step lines on stdout) →
write final state snapshot → optional trajectory.
"""
import logging
from pathlib import Path
from typing import Optional, Sequence

from pipeline.cli_parser import create_argument_parser
from pipeline.config import OutputConfig, SceneConfig, SimulationConfig
from pipeline.create_default_scene import create_default_scene
from pipeline.error_handler import ErrorHandler, FileOperationError, SimulationError
from pipeline.file_operations import save_final_state, save_numpy_array
from pipeline.output_handler import SimulationOutputHandler
from pipeline.run_simulation import SimulationRunner


def run_pipeline(args, error_handler: ErrorHandler) -> None:
    sim_config = SimulationConfig.from_args(args)
    output_config = OutputConfig.from_args(args)
    scene = create_default_scene(SceneConfig.from_args(args))
    
    output_handler = SimulationOutputHandler(verbose=output_config.report_status)
    runner = SimulationRunner(
        sim_config,
        scene,
        output_handler=output_handler,
        print_steps=output_config.print_steps,
        csv_dir=output_config.csv_dir
    )
    final_state, metrics = runner.run()
    output_handler.print_simulation_complete(metrics)
    output_handler.print_profiling_data(metrics.get('profile_data'))
    
    with error_handler.error_context("write final state", FileOperationError):
        save_final_state(final_state, output_config.final_state_output)
    output_handler.print_final_state_saved(output_config.final_state_output)
    
    trajectory = runner.get_trajectory()
    if output_config.trajectory_output is not None and trajectory is not None:
        with error_handler.error_context("save trajectory", FileOperationError):
            save_numpy_array(trajectory, output_config.trajectory_output)
        output_handler.print_trajectory_saved(output_config.trajectory_output, trajectory.shape)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = create_argument_parser()
    args = parser.parse_args(argv)
    
    level = logging.DEBUG if args.verbose else logging.INFO
    try:
        error_handler = ErrorHandler(
            log_file=Path(args.log_file) if args.log_file else None,
            level=level
        )
    except FileOperationError as e:
        # Fall back to stderr only so the failure is still reported
        ErrorHandler(level=level).handle_error(e, critical=True)
    
    try:
        run_pipeline(args, error_handler)
    except SimulationError as e:
        error_handler.handle_error(e, critical=True)
    
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
