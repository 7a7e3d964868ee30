"""tinygrad backend for the leapfrog engine.

Same scheme and interface as the numpy PhysicsEngine, with state held as
float32 Tensors. Contact terms are gated by multiplying with the overlap mask
instead of Tensor.where, so inactive contacts contribute an exact zero.
"""
import numpy as np
from tinygrad import Tensor
from .params import SimulationParameters
from .types import Body, body_from_soa, validate_soa

def tensor_forces(x: Tensor, v: Tensor, mass: Tensor, radius: Tensor, params: SimulationParameters) -> Tensor:
  """Net force (N, 3) from gravity and the four penalty boundaries."""
  k, b = params.stiffness, params.damping
  rx, rz = x[:, 0], x[:, 2]
  vx, vz = v[:, 0], v[:, 2]

  d_floor = radius - rz
  d_ceiling = rz + radius - params.lz_max
  d_left = params.lx_min - (rx - radius)
  d_right = rx + radius - params.lx

  fx = ((-k * d_right - b * mass * vx) * (d_right > 0).float()
        + (k * d_left - b * mass * vx) * (d_left > 0).float())
  fz = (-mass * params.gravity
        + (k * d_floor - b * mass * vz) * (d_floor > 0).float()
        + (-k * d_ceiling - b * mass * vz) * (d_ceiling > 0).float())
  fy = Tensor.zeros_like(fx)
  return Tensor.stack(fx, fy, fz, dim=1)

def tensor_leapfrog_step(x: Tensor, v: Tensor, f: Tensor, mass: Tensor, dt: float) -> tuple[Tensor, Tensor]:
  new_v = v + f * dt / mass.unsqueeze(-1)
  new_x = x + new_v * dt
  return new_x, new_v

class TensorPhysicsEngine:

  def __init__(self, x: np.ndarray, v: np.ndarray, mass: np.ndarray, radius: np.ndarray,
               params: SimulationParameters | None = None):
    self.params = params if params is not None else SimulationParameters()
    mass = np.asarray(mass, dtype=np.float64).reshape(-1)
    radius = np.asarray(radius, dtype=np.float64).reshape(-1)
    validate_soa(np.asarray(x, dtype=np.float64), np.asarray(v, dtype=np.float64), mass, radius)
    self.mass = Tensor(mass.astype(np.float32))
    self.radius = Tensor(radius.astype(np.float32))
    self.step_count = 0
    self._prime(x, v)

  def _prime(self, x: np.ndarray, v: np.ndarray) -> None:
    # Initial force from v(0), then back-step the velocity by dt/2
    self.x = Tensor(np.asarray(x, dtype=np.float32)).realize()
    v0 = Tensor(np.asarray(v, dtype=np.float32))
    self.f = tensor_forces(self.x, v0, self.mass, self.radius, self.params).realize()
    self.v = (v0 - self.f * self.params.dt / (2 * self.mass.unsqueeze(-1))).realize()

  @property
  def num_bodies(self) -> int:
    return self.mass.shape[0]

  @property
  def time(self) -> float:
    return self.step_count * self.params.dt

  def step(self) -> None:
    x, v = tensor_leapfrog_step(self.x, self.v, self.f, self.mass, self.params.dt)
    # Realize every step so the lazy graph does not grow with the step count
    self.x, self.v = x.realize(), v.realize()
    self.f = tensor_forces(self.x, self.v, self.mass, self.radius, self.params).realize()
    self.step_count += 1

  def run_simulation(self, num_steps: int) -> None:
    for _ in range(num_steps):
      self.step()

  def get_state(self) -> dict[str, np.ndarray]:
    return {
      'x': self.x.numpy().astype(np.float64),
      'v': self.v.numpy().astype(np.float64),
      'f': self.f.numpy().astype(np.float64),
      'mass': self.mass.numpy().astype(np.float64),
      'radius': self.radius.numpy().astype(np.float64),
    }

  def get_body(self, index: int) -> Body:
    return body_from_soa(self.get_state(), index)

  def set_state(self, x: np.ndarray, v: np.ndarray) -> None:
    validate_soa(np.asarray(x, dtype=np.float64), np.asarray(v, dtype=np.float64),
                 self.mass.numpy(), self.radius.numpy())
    self._prime(x, v)
