#!/usr/bin/env python3
"""Simulation runner for the bounce engine.

Separates concerns: engine construction, the step loop with its per-step
reporting, trajectory collection and profiling.
"""
import logging
import time
import numpy as np
from pathlib import Path
from typing import Tuple, Dict, List, Optional, Any
from dataclasses import dataclass

from bounce.diagnostics import total_energy
from bounce.engine import create_engine
from pipeline.config import SimulationConfig
from pipeline.error_handler import ConfigurationError, FileOperationError, PhysicsEngineError
from pipeline.file_operations import save_csv_frame
from pipeline.output_handler import SimulationOutputHandler

logger = logging.getLogger(__name__)


@dataclass
class SimulationMetrics:
    """Encapsulates simulation performance metrics."""
    total_time: float
    steps_per_second: float
    simulated_time: float
    initial_energy: float
    final_energy: float
    execution_mode: str
    num_steps: int
    trajectory_collected: bool
    profile_data: Optional[Dict[str, float]] = None
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert metrics to dictionary format."""
        result = {
            'total_time': self.total_time,
            'steps_per_second': self.steps_per_second,
            'simulated_time': self.simulated_time,
            'initial_energy': self.initial_energy,
            'final_energy': self.final_energy,
            'execution_mode': self.execution_mode,
            'num_steps': self.num_steps,
            'trajectory_collected': self.trajectory_collected
        }
        if self.profile_data:
            result['profile_data'] = self.profile_data
        return result


class TrajectoryCollector:
    """Manages position trajectory collection during simulation."""
    
    def __init__(self, collect: bool = True):
        self.collect = collect
        self.trajectory: Optional[List[np.ndarray]] = [] if collect else None
    
    def add_frame(self, state: Dict[str, np.ndarray]) -> None:
        if self.collect:
            self.trajectory.append(state['x'].copy())
    
    def get_result(self) -> Optional[np.ndarray]:
        """Stacked positions of shape (frames, N, 3), or None when disabled."""
        if not self.collect or not self.trajectory:
            return None
        return np.stack(self.trajectory)


class SimulationProfiler:
    """Handles performance profiling of simulation steps."""
    
    def __init__(self, enabled: bool = False):
        self.enabled = enabled
        self.step_times: Optional[List[float]] = [] if enabled else None
    
    def record_step_time(self, duration: float) -> None:
        if self.enabled:
            self.step_times.append(duration)
    
    def get_profile_data(self) -> Optional[Dict[str, float]]:
        """Get profiling statistics.
        
        Returns:
            Dictionary with profiling metrics or None if disabled
        """
        if not self.enabled or not self.step_times:
            return None
        
        return {
            'avg_step_time': float(np.mean(self.step_times)),
            'min_step_time': float(np.min(self.step_times)),
            'max_step_time': float(np.max(self.step_times)),
            'std_step_time': float(np.std(self.step_times))
        }


class SimulationRunner:
    """Runs the step loop: report, integrate, recompute force, optional CSV frame."""
    
    def __init__(self, config: SimulationConfig, scene: Dict[str, np.ndarray],
                 output_handler: Optional[SimulationOutputHandler] = None,
                 print_steps: bool = True, csv_dir: Optional[Path] = None):
        """Initialize the simulation runner.
        
        Args:
            config: Backend, step count and physical parameters
            scene: Structure-of-arrays initial state (x, v, mass, radius)
            output_handler: Console reporter
            print_steps: Whether to print one line per step
            csv_dir: Directory for per-step CSV frames, or None to skip them
        """
        self.config = config
        self.output_handler = output_handler or SimulationOutputHandler()
        self.print_steps = print_steps
        self.csv_dir = csv_dir
        
        self.trajectory_collector = TrajectoryCollector(config.collect_trajectory)
        self.profiler = SimulationProfiler(config.enable_profiling)
        
        try:
            self.engine = create_engine(
                config.mode,
                x=scene['x'],
                v=scene['v'],
                mass=scene['mass'],
                radius=scene['radius'],
                params=config.parameters
            )
        except ValueError as e:
            raise ConfigurationError(f"Invalid initial state: {e}") from e
        logger.debug(f"Engine ready: {type(self.engine).__name__}, {config.parameters}")

    def run(self) -> Tuple[Dict[str, np.ndarray], Dict[str, Any]]:
        """Execute the simulation.
        
        Returns:
            Tuple of (final_state, metrics_dict)
        """
        self.output_handler.print_simulation_start(
            self.config.mode.value, self.config.steps, self.engine.num_bodies)
        
        state = self.engine.get_state()
        initial_energy = total_energy(state, self.config.parameters)
        self.trajectory_collector.add_frame(state)
        
        start_time = time.perf_counter()
        for step in range(self.config.steps):
            if self.print_steps:
                self.output_handler.print_step(step * self.config.parameters.dt, state)
            
            step_start = time.perf_counter()
            self.engine.step()
            self.profiler.record_step_time(time.perf_counter() - step_start)
            
            state = self.engine.get_state()
            self._check_finite(state, step)
            self.trajectory_collector.add_frame(state)
            if self.csv_dir is not None:
                self._write_csv_frame(state, step)
        total_time = time.perf_counter() - start_time
        
        metrics = self._build_metrics(total_time, initial_energy, total_energy(state, self.config.parameters))
        return state, metrics.to_dict()
    
    def get_trajectory(self) -> Optional[np.ndarray]:
        return self.trajectory_collector.get_result()
    
    def _write_csv_frame(self, state: Dict[str, np.ndarray], step: int) -> None:
        try:
            save_csv_frame(state, self.csv_dir, step)
        except OSError as e:
            raise FileOperationError(f"Failed to write CSV frame {step} to {self.csv_dir}: {e}") from e

    def _check_finite(self, state: Dict[str, np.ndarray], step: int) -> None:
        for key in ('x', 'v', 'f'):
            if not np.all(np.isfinite(state[key])):
                raise PhysicsEngineError(
                    f"Non-finite {key} after step {step}; "
                    f"dt={self.config.parameters.dt} may be too large for the contact stiffness")
    
    def _build_metrics(self, total_time: float, initial_energy: float,
                       final_energy: float) -> SimulationMetrics:
        steps = self.config.steps
        return SimulationMetrics(
            total_time=total_time,
            steps_per_second=steps / total_time if total_time > 0 else 0.0,
            simulated_time=self.engine.time,
            initial_energy=initial_energy,
            final_energy=final_energy,
            execution_mode=self.config.mode.value,
            num_steps=steps,
            trajectory_collected=self.trajectory_collector.collect,
            profile_data=self.profiler.get_profile_data()
        )
