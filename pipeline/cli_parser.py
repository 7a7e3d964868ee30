import argparse

from pipeline.config import PhysicsConstants


def create_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Leapfrog simulation of a sphere bouncing inside penalty walls",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=_get_usage_examples()
    )
    
    _add_simulation_arguments(parser)
    _add_scene_arguments(parser)
    _add_output_arguments(parser)
    
    return parser


def _get_usage_examples() -> str:
    return """
Usage Examples:
    # Reference run (1000 steps, final state in datos.txt)
    bounce-sim
    
    # Switch gravity on and drop the sphere from 2 m
    bounce-sim --gravity 9.81 --position 0 0 2 --velocity 0 0 0
    
    # Write one CSV frame per step
    bounce-sim --csv-dir frames
    
    # Use the tinygrad backend without per-step console output
    bounce-sim --mode tensor --quiet
"""


def _add_simulation_arguments(parser: argparse.ArgumentParser) -> None:
    simulation_group = parser.add_argument_group('Simulation Options')
    
    simulation_group.add_argument(
        "--mode",
        choices=["pure", "tensor"],
        default=PhysicsConstants.DEFAULT_MODE,
        help="Engine backend: numpy (pure) or tinygrad (tensor) (default: pure)"
    )
    
    simulation_group.add_argument(
        "--steps",
        type=int,
        default=PhysicsConstants.DEFAULT_STEPS,
        help="Number of simulation steps (default: 1000)"
    )
    
    simulation_group.add_argument(
        "--dt",
        type=float,
        help="Timestep in seconds (default: 0.01)"
    )
    
    simulation_group.add_argument(
        "--gravity",
        type=float,
        help="Gravitational acceleration along -z (default: 0)"
    )
    
    simulation_group.add_argument(
        "--stiffness",
        type=float,
        help="Penalty spring stiffness K (default: 323.9)"
    )
    
    simulation_group.add_argument(
        "--damping",
        type=float,
        help="Contact damping coefficient B (default: 0.9)"
    )
    
    simulation_group.add_argument(
        "--lx",
        type=float,
        help="Right wall position (default: 3.2)"
    )
    
    simulation_group.add_argument(
        "--lx-min",
        type=float,
        help="Left wall position (default: -0.5)"
    )
    
    simulation_group.add_argument(
        "--lz-max",
        type=float,
        help="Ceiling height (default: 10.32)"
    )
    
    simulation_group.add_argument(
        "--profile",
        action="store_true",
        help="Record per-step timings"
    )


def _add_scene_arguments(parser: argparse.ArgumentParser) -> None:
    scene_group = parser.add_argument_group('Scene Options')
    
    scene_group.add_argument(
        "--mass",
        type=float,
        help="Body mass (default: 1.23)"
    )
    
    scene_group.add_argument(
        "--radius",
        type=float,
        help="Body radius (default: 0.16)"
    )
    
    scene_group.add_argument(
        "--position",
        type=float,
        nargs=3,
        metavar=("X", "Y", "Z"),
        help="Initial position (default: 0 0 7.86)"
    )
    
    scene_group.add_argument(
        "--velocity",
        type=float,
        nargs=3,
        metavar=("VX", "VY", "VZ"),
        help="Initial velocity (default: 0.87 0 1.32)"
    )


def _add_output_arguments(parser: argparse.ArgumentParser) -> None:
    output_group = parser.add_argument_group('Output Options')
    
    output_group.add_argument(
        "--final-state-output",
        type=str,
        default=PhysicsConstants.DEFAULT_FINAL_STATE_FILE,
        help="Path for the final state snapshot (default: datos.txt)"
    )
    
    output_group.add_argument(
        "--csv-dir",
        type=str,
        help="Write data-<step>.csv frames into this directory"
    )
    
    output_group.add_argument(
        "--trajectory-output",
        type=str,
        help="Save the position trajectory as a .npy file"
    )
    
    output_group.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Do not print the per-step state lines"
    )
    
    output_group.add_argument(
        "--no-summary",
        action="store_true",
        help="Do not log the start, completion and saved-file messages"
    )
    
    output_group.add_argument(
        "--log-file",
        type=str,
        help="Also write log messages to this file"
    )
    
    output_group.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )
