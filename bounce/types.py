from enum import Enum
from dataclasses import dataclass, field
import numpy as np

class ExecutionMode(Enum):
  """Supported engine backends."""
  PURE = "pure"
  TENSOR = "tensor"

def _vector3(value, name: str) -> np.ndarray:
  vec = np.array(value, dtype=np.float64)
  if vec.shape != (3,):
    raise ValueError(f"{name} must be a 3D vector")
  return vec

@dataclass
class Body:
  """A point-mass sphere. Force is transient and recomputed every step."""
  mass: float
  radius: float
  r: np.ndarray = field(default_factory=lambda: np.zeros(3))
  v: np.ndarray = field(default_factory=lambda: np.zeros(3))
  f: np.ndarray = field(default_factory=lambda: np.zeros(3))

  def __post_init__(self):
    self.r = _vector3(self.r, "Position")
    self.v = _vector3(self.v, "Velocity")
    self.f = _vector3(self.f, "Force")
    if not self.mass > 0:
      raise ValueError(f"Mass must be positive, got {self.mass}")
    if not self.radius > 0:
      raise ValueError(f"Radius must be positive, got {self.radius}")
    self.mass = float(self.mass)
    self.radius = float(self.radius)

def create_soa_body_data(bodies: list[Body]) -> dict[str, np.ndarray]:
  if not bodies:
    raise ValueError("At least one body is required")
  return {
    'x': np.stack([b.r for b in bodies], axis=0),
    'v': np.stack([b.v for b in bodies], axis=0),
    'f': np.stack([b.f for b in bodies], axis=0),
    'mass': np.array([b.mass for b in bodies], dtype=np.float64),
    'radius': np.array([b.radius for b in bodies], dtype=np.float64),
  }

def body_from_soa(state: dict[str, np.ndarray], index: int) -> Body:
  return Body(
    mass=float(state['mass'][index]),
    radius=float(state['radius'][index]),
    r=state['x'][index],
    v=state['v'][index],
    f=state['f'][index],
  )

def validate_soa(x: np.ndarray, v: np.ndarray, mass: np.ndarray, radius: np.ndarray) -> None:
  """Check shapes and physical validity of structure-of-arrays body data."""
  n = mass.shape[0] if mass.ndim == 1 else -1
  if n < 1:
    raise ValueError("mass must be a non-empty 1D array")
  if x.shape != (n, 3):
    raise ValueError(f"positions must have shape ({n}, 3), got {x.shape}")
  if v.shape != (n, 3):
    raise ValueError(f"velocities must have shape ({n}, 3), got {v.shape}")
  if radius.shape != (n,):
    raise ValueError(f"radius must have shape ({n},), got {radius.shape}")
  if not np.all(mass > 0):
    raise ValueError("Mass must be positive for every body")
  if not np.all(radius > 0):
    raise ValueError("Radius must be positive for every body")
