"""Penalty-based boundary forces for point-mass spheres.

Each body feels gravity plus a spring/damper force from every boundary it
currently overlaps. A contact exists only while the sphere penetrates a
boundary; the restoring force is proportional to the overlap depth and a
mass-proportional damping term opposes the velocity along the contact axis.

Boundaries:
- Floor: plane z = 0, pushes along +z
- Ceiling: plane z = lz_max, pushes along -z
- Left wall: plane x = lx_min, pushes along +x
- Right wall: plane x = lx, pushes along -x

Bodies never interact with each other, so evaluation is O(N) and every body
is independent. The y axis is unbounded and its force is always zero.
"""
import numpy as np
from .params import SimulationParameters

def penetration_depths(x: np.ndarray, radius: np.ndarray, params: SimulationParameters) -> dict[str, np.ndarray]:
  """Signed overlap of each body with each boundary (positive = penetrating).

  Args:
    x: Positions (N, 3)
    radius: Radii (N,)
    params: Boundary locations

  Returns:
    Dict of (N,) arrays keyed by 'floor', 'ceiling', 'left', 'right'
  """
  return {
    'floor': radius - x[:, 2],
    'ceiling': x[:, 2] + radius - params.lz_max,
    'left': params.lx_min - (x[:, 0] - radius),
    'right': x[:, 0] + radius - params.lx,
  }

def compute_forces(x: np.ndarray, v: np.ndarray, mass: np.ndarray, radius: np.ndarray,
                   params: SimulationParameters) -> np.ndarray:
  """Evaluate the net force on every body.

  Pure function of the current state: the accumulator starts from zero on
  every call, so calling it twice with unchanged inputs gives identical output.

  Args:
    x: Positions (N, 3)
    v: Velocities (N, 3)
    mass: Masses (N,)
    radius: Radii (N,)
    params: Physical constants and boundaries

  Returns:
    Forces (N, 3)
  """
  k, b = params.stiffness, params.damping
  depth = penetration_depths(x, radius, params)
  f = np.zeros_like(x, dtype=np.float64)

  # Gravity
  f[:, 2] -= mass * params.gravity

  # Floor and ceiling act along z
  f[:, 2] += np.where(depth['floor'] > 0, k * depth['floor'] - b * mass * v[:, 2], 0.0)
  f[:, 2] += np.where(depth['ceiling'] > 0, -k * depth['ceiling'] - b * mass * v[:, 2], 0.0)

  # Walls act along x
  f[:, 0] += np.where(depth['right'] > 0, -k * depth['right'] - b * mass * v[:, 0], 0.0)
  f[:, 0] += np.where(depth['left'] > 0, k * depth['left'] - b * mass * v[:, 0], 0.0)

  return f
