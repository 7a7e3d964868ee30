"""Error handling module for the simulation pipeline.

Provides the exception hierarchy, logging setup and validation helpers.
"""
import sys
import logging
from typing import List, Optional, Type, Sequence
from pathlib import Path
from contextlib import contextmanager

import numpy as np


class SimulationError(Exception):
    """Base exception for simulation-related errors."""
    pass


class ConfigurationError(SimulationError):
    """Raised when configuration or initial conditions are invalid."""
    pass


class FileOperationError(SimulationError):
    """Raised when file operations fail."""
    pass


class PhysicsEngineError(SimulationError):
    """Raised when the physics engine produces an invalid state."""
    pass


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class ErrorHandler:
    """Centralized error handling for the simulation pipeline."""

    _installed_handlers: List[logging.Handler] = []

    def __init__(self, log_file: Optional[Path] = None, verbose: bool = True,
                 level: int = logging.INFO):
        """Initialize the error handler.
        
        Args:
            log_file: Optional path to log file
            verbose: Whether to log to stderr
            level: Root logging level
        """
        self.verbose = verbose
        self._setup_logging(log_file, level)
    
    def _setup_logging(self, log_file: Optional[Path], level: int) -> None:
        """Setup logging configuration."""
        handlers = []
        
        if log_file:
            try:
                handlers.append(logging.FileHandler(log_file))
            except OSError as e:
                raise FileOperationError(f"Failed to open log file {log_file}: {e}") from e
        
        if self.verbose:
            handlers.append(logging.StreamHandler(sys.stderr))
        
        # Replace only the handlers a previous ErrorHandler installed
        root = logging.getLogger()
        for handler in ErrorHandler._installed_handlers:
            root.removeHandler(handler)
            handler.close()

        formatter = logging.Formatter(LOG_FORMAT)
        for handler in handlers:
            handler.setFormatter(formatter)
            root.addHandler(handler)
        ErrorHandler._installed_handlers = handlers
        root.setLevel(level)

        self.logger = logging.getLogger('bounce_simulation')
    
    def handle_error(self, error: Exception, critical: bool = True) -> None:
        """Handle an error with appropriate logging.
        
        Args:
            error: The exception that occurred
            critical: Whether this error should terminate execution
        """
        error_type = type(error).__name__
        error_message = str(error)
        
        if isinstance(error, SimulationError):
            self.logger.error(f"{error_type}: {error_message}")
        else:
            self.logger.exception(f"Unexpected error: {error_message}")
        
        if critical:
            sys.exit(1)
    
    def log_info(self, message: str) -> None:
        """Log an info message."""
        self.logger.info(message)
    
    @contextmanager
    def error_context(self, operation: str, error_type: Type[SimulationError] = SimulationError):
        """Context manager for handling errors in a specific operation.
        
        Errors that already are SimulationErrors pass through unchanged.
        Nothing is logged here; handle_error reports the raised error once.
        
        Args:
            operation: Description of the operation being performed
            error_type: Type of error to raise if exception occurs
        """
        try:
            yield
        except SimulationError:
            raise
        except Exception as e:
            raise error_type(f"Failed to {operation}: {e}") from e


def validate_positive_number(value: float, parameter_name: str) -> None:
    """Validate that a number is positive.
    
    Raises:
        ConfigurationError: If value is not positive
    """
    if not value > 0:
        raise ConfigurationError(f"{parameter_name} must be positive, got {value}")


def validate_execution_mode(mode: str, valid_modes: list) -> None:
    """Validate execution mode is supported.
    
    Raises:
        ConfigurationError: If mode is not valid
    """
    if mode not in valid_modes:
        raise ConfigurationError(
            f"Invalid execution mode '{mode}'. Valid modes: {', '.join(valid_modes)}"
        )


def validate_vector3(value: Sequence[float], parameter_name: str) -> np.ndarray:
    """Validate a finite 3D vector and return it as a float64 array.
    
    Raises:
        ConfigurationError: If value is not three finite numbers
    """
    try:
        vec = np.array(value, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"{parameter_name} must be numeric: {e}") from e
    if vec.shape != (3,):
        raise ConfigurationError(f"{parameter_name} must be a 3D vector, got shape {vec.shape}")
    if not np.all(np.isfinite(vec)):
        raise ConfigurationError(f"{parameter_name} must be finite, got {vec.tolist()}")
    return vec
