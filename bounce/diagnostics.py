"""Energy bookkeeping for the penalty model.

Total mechanical energy is kinetic + gravitational + elastic energy stored in
the boundary springs. Damping removes energy during contact, so the total
never grows for a well-resolved step size. Velocities in a leapfrog engine are
half a step behind positions; energies computed from engine state are
therefore approximate at the O(dt) level.
"""
import numpy as np
from .forces import penetration_depths
from .params import SimulationParameters

def kinetic_energy(v: np.ndarray, mass: np.ndarray) -> float:
  return float(0.5 * np.sum(mass * np.sum(v * v, axis=1)))

def potential_energy(x: np.ndarray, mass: np.ndarray, params: SimulationParameters) -> float:
  return float(np.sum(mass * params.gravity * x[:, 2]))

def contact_energy(x: np.ndarray, radius: np.ndarray, params: SimulationParameters) -> float:
  depth = penetration_depths(x, radius, params)
  total = 0.0
  for d in depth.values():
    overlap = np.maximum(d, 0.0)
    total += float(0.5 * params.stiffness * np.sum(overlap * overlap))
  return total

def total_energy(state: dict[str, np.ndarray], params: SimulationParameters) -> float:
  """Mechanical energy of an engine state dict (keys x, v, mass, radius)."""
  return (kinetic_energy(state['v'], state['mass'])
          + potential_energy(state['x'], state['mass'], params)
          + contact_energy(state['x'], state['radius'], params))
