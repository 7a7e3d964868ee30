"""Configuration classes for the simulation pipeline."""
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from bounce.params import SimulationParameters
from bounce.types import ExecutionMode
from pipeline.error_handler import ConfigurationError, validate_execution_mode


@dataclass
class PhysicsConstants:
    """Defaults for the reference scenario."""
    DEFAULT_STEPS: int = 1000
    DEFAULT_MODE: str = "pure"
    DEFAULT_FINAL_STATE_FILE: str = "datos.txt"
    DEFAULT_MASS: float = 1.23
    DEFAULT_RADIUS: float = 0.16
    DEFAULT_POSITION: tuple = (0.0, 0.0, 7.86)
    DEFAULT_VELOCITY: tuple = (0.87, 0.0, 1.32)


@dataclass
class SimulationConfig:
    """Configuration for the simulation run."""
    mode: ExecutionMode
    steps: int
    parameters: SimulationParameters
    enable_profiling: bool = False
    collect_trajectory: bool = False
    
    @classmethod
    def from_args(cls, args) -> 'SimulationConfig':
        """Create config from command-line arguments."""
        validate_execution_mode(args.mode, [mode.value for mode in ExecutionMode])
        if args.steps < 0:
            raise ConfigurationError(f"steps must be non-negative, got {args.steps}")
        try:
            parameters = SimulationParameters().with_overrides(
                gravity=args.gravity,
                dt=args.dt,
                stiffness=args.stiffness,
                damping=args.damping,
                lx=args.lx,
                lx_min=args.lx_min,
                lz_max=args.lz_max
            )
            mode = ExecutionMode(args.mode)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e
        return cls(
            mode=mode,
            steps=args.steps,
            parameters=parameters,
            enable_profiling=args.profile,
            collect_trajectory=args.trajectory_output is not None
        )


@dataclass
class SceneConfig:
    """Overrides for the default body."""
    mass: Optional[float] = None
    radius: Optional[float] = None
    position: Optional[tuple] = None
    velocity: Optional[tuple] = None
    
    @classmethod
    def from_args(cls, args) -> 'SceneConfig':
        """Create config from command-line arguments."""
        return cls(
            mass=args.mass,
            radius=args.radius,
            position=tuple(args.position) if args.position else None,
            velocity=tuple(args.velocity) if args.velocity else None
        )


@dataclass
class OutputConfig:
    """Configuration for output files and console reporting."""
    final_state_output: Path
    csv_dir: Optional[Path] = None
    trajectory_output: Optional[Path] = None
    print_steps: bool = True
    report_status: bool = True
    
    @classmethod
    def from_args(cls, args) -> 'OutputConfig':
        """Create config from command-line arguments."""
        return cls(
            final_state_output=Path(args.final_state_output),
            csv_dir=Path(args.csv_dir) if args.csv_dir else None,
            trajectory_output=Path(args.trajectory_output) if args.trajectory_output else None,
            print_steps=not args.quiet,
            report_status=not args.no_summary
        )
