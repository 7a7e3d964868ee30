"""Leapfrog (staggered velocity) time integration.

Velocities live at half-integer times relative to positions. Before the first
step the velocity is moved back by half a step using the initial force:

  v(-dt/2) = v(0) - dt * f(0) / (2m)

after which every step is the familiar kick-drift pair

  v(t + dt/2) = v(t - dt/2) + dt * f(t) / m
  x(t + dt)   = x(t) + v(t + dt/2) * dt

which looks first order but is second-order accurate thanks to the offset.
Functions here never mutate their inputs.
"""
import numpy as np

def half_step_velocity(v: np.ndarray, f: np.ndarray, mass: np.ndarray, dt: float) -> np.ndarray:
  """Back-step velocities by half a step. Run once, after the initial force evaluation."""
  return v - dt * f / (2 * mass[:, None])

def leapfrog_step(x: np.ndarray, v: np.ndarray, f: np.ndarray, mass: np.ndarray,
                  dt: float) -> tuple[np.ndarray, np.ndarray]:
  """Advance one step.

  Args:
    x: Positions at t (N, 3)
    v: Velocities at t - dt/2 (N, 3)
    f: Forces at t (N, 3)
    mass: Masses (N,)
    dt: Time step

  Returns:
    Tuple of (x at t + dt, v at t + dt/2)
  """
  new_v = v + dt * f / mass[:, None]
  new_x = x + new_v * dt
  return new_x, new_v
