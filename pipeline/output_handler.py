"""Output handling module for simulation results.

Step lines are data and go to the output stream (stdout by default). Status
messages go through logging so they never interleave with the data.
"""
from typing import Dict, Any, Optional, TextIO
from pathlib import Path
import logging
import sys

import numpy as np

logger = logging.getLogger(__name__)


def format_step_line(time: float, position: np.ndarray, velocity: np.ndarray) -> str:
    """Format one console line: time, r_x, r_y, r_z, v_x, v_y, v_z.
    
    Values use %g (six significant digits), so the reference start state
    prints as ``0 0 0 7.86 0.87 0 1.32``.
    """
    values = [time, *position, *velocity]
    return " ".join(format(float(value), "g") for value in values)


class SimulationOutputHandler:
    """Handles all output operations for simulation results."""
    
    def __init__(self, stream: Optional[TextIO] = None, verbose: bool = True,
                 tracked_body: int = 0):
        """Initialize the output handler.
        
        Args:
            stream: Destination for step lines (default: sys.stdout at call time)
            verbose: Whether to log detailed status messages
            tracked_body: Index of the body reported on each step
        """
        self.stream = stream
        self.verbose = verbose
        self.tracked_body = tracked_body
    
    def print_step(self, time: float, state: Dict[str, np.ndarray]) -> None:
        """Print the tracked body's state for one step."""
        stream = self.stream if self.stream is not None else sys.stdout
        i = self.tracked_body
        print(format_step_line(time, state['x'][i], state['v'][i]), file=stream)
    
    def print_simulation_start(self, mode: str, steps: int, num_bodies: int) -> None:
        if not self.verbose:
            return
        logger.info(f"Running {mode} mode simulation of {num_bodies} body(ies) for {steps} steps")
    
    def print_simulation_complete(self, metrics: Dict[str, Any]) -> None:
        """Log simulation completion summary.
        
        Args:
            metrics: Simulation metrics dictionary
        """
        if not self.verbose:
            return
        logger.info(f"Simulation complete: {metrics['num_steps']} steps, "
                    f"simulated time {metrics['simulated_time']:.3f}s")
        logger.info(f"Wall time: {metrics['total_time']:.3f} seconds "
                    f"({metrics['steps_per_second']:.1f} steps/s)")
        logger.info(f"Mechanical energy: {metrics['initial_energy']:.6g} -> {metrics['final_energy']:.6g}")
    
    def print_profiling_data(self, profile_data: Optional[Dict[str, Any]]) -> None:
        if not self.verbose or not profile_data:
            return
        for key, value in profile_data.items():
            logger.info(f"  {key}: {value}")
    
    def print_final_state_saved(self, output_path: Path) -> None:
        if not self.verbose:
            return
        logger.info(f"Final state saved to: {output_path}")
    
    def print_trajectory_saved(self, output_path: Path, shape: tuple) -> None:
        if not self.verbose:
            return
        logger.info(f"Trajectory {shape} saved to: {output_path}")
