"""Simulation constants gathered into one immutable structure.

The defaults reproduce the reference scenario: gravity switched off, a stiff
penalty spring with light damping, and a box open along y bounded by a floor at
z = 0, a ceiling at z = lz_max and walls at x = lx_min and x = lx.
"""
import math
from dataclasses import dataclass, replace

@dataclass(frozen=True)
class SimulationParameters:
  gravity: float = 0.0      # G, acceleration along -z
  dt: float = 0.01
  stiffness: float = 323.9  # K
  damping: float = 0.9      # B, force is -B*mass*v along the contact axis
  lx: float = 3.2
  lx_min: float = -0.5
  lz_max: float = 10.32

  def __post_init__(self):
    if not math.isfinite(self.gravity):
      raise ValueError(f"gravity must be finite, got {self.gravity}")
    if not self.dt > 0:
      raise ValueError(f"dt must be positive, got {self.dt}")
    if not self.stiffness >= 0:
      raise ValueError(f"stiffness must be non-negative, got {self.stiffness}")
    if not self.damping >= 0:
      raise ValueError(f"damping must be non-negative, got {self.damping}")
    if not self.lx > self.lx_min:
      raise ValueError(f"lx ({self.lx}) must be greater than lx_min ({self.lx_min})")
    if not self.lz_max > 0:
      raise ValueError(f"lz_max must be positive, got {self.lz_max}")

  def with_overrides(self, **changes) -> 'SimulationParameters':
    """Return a copy with the given fields replaced, skipping None values."""
    return replace(self, **{k: v for k, v in changes.items() if v is not None})
