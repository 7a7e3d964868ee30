import numpy as np
from .forces import compute_forces
from .integration import half_step_velocity, leapfrog_step
from .params import SimulationParameters
from .types import Body, ExecutionMode, body_from_soa, validate_soa

class PhysicsEngine:
  """Leapfrog engine over numpy float64 arrays.

  Construction primes the scheme: the initial force is evaluated from r(0),
  v(0) and the velocity is moved back half a step. A constructed engine is
  therefore always ready to step, and the ordering cannot be skipped.
  """

  def __init__(self, x: np.ndarray, v: np.ndarray, mass: np.ndarray, radius: np.ndarray,
               params: SimulationParameters | None = None):
    self.params = params if params is not None else SimulationParameters()
    self.mass = np.asarray(mass, dtype=np.float64).reshape(-1)
    self.radius = np.asarray(radius, dtype=np.float64).reshape(-1)
    x = np.asarray(x, dtype=np.float64)
    v = np.asarray(v, dtype=np.float64)
    validate_soa(x, v, self.mass, self.radius)
    self.step_count = 0
    self._prime(x, v)

  @classmethod
  def from_bodies(cls, bodies: list[Body], params: SimulationParameters | None = None) -> 'PhysicsEngine':
    return cls(
      x=np.stack([b.r for b in bodies]),
      v=np.stack([b.v for b in bodies]),
      mass=np.array([b.mass for b in bodies]),
      radius=np.array([b.radius for b in bodies]),
      params=params,
    )

  def _prime(self, x: np.ndarray, v: np.ndarray) -> None:
    self.x = x.copy()
    self.f = compute_forces(self.x, v, self.mass, self.radius, self.params)
    self.v = half_step_velocity(v, self.f, self.mass, self.params.dt)

  @property
  def num_bodies(self) -> int:
    return self.mass.shape[0]

  @property
  def time(self) -> float:
    return self.step_count * self.params.dt

  def step(self) -> None:
    """Integrate one step, then refresh the force for the new state."""
    self.x, self.v = leapfrog_step(self.x, self.v, self.f, self.mass, self.params.dt)
    self.f = compute_forces(self.x, self.v, self.mass, self.radius, self.params)
    self.step_count += 1

  def run_simulation(self, num_steps: int) -> None:
    for _ in range(num_steps):
      self.step()

  def get_state(self) -> dict[str, np.ndarray]:
    return {
      'x': self.x.copy(),
      'v': self.v.copy(),
      'f': self.f.copy(),
      'mass': self.mass.copy(),
      'radius': self.radius.copy(),
    }

  def get_body(self, index: int) -> Body:
    return body_from_soa(self.get_state(), index)

  def set_state(self, x: np.ndarray, v: np.ndarray) -> None:
    """Replace positions and velocities (both at the current time) and re-prime."""
    x = np.asarray(x, dtype=np.float64)
    v = np.asarray(v, dtype=np.float64)
    validate_soa(x, v, self.mass, self.radius)
    self._prime(x, v)

def create_engine(mode: ExecutionMode, x: np.ndarray, v: np.ndarray, mass: np.ndarray,
                  radius: np.ndarray, params: SimulationParameters | None = None):
  """Build the engine for the requested backend."""
  if mode == ExecutionMode.PURE:
    return PhysicsEngine(x, v, mass, radius, params)
  if mode == ExecutionMode.TENSOR:
    from .tensor_engine import TensorPhysicsEngine
    return TensorPhysicsEngine(x, v, mass, radius, params)
  raise ValueError(f"Unknown execution mode: {mode}")
