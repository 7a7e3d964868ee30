"""Test fixtures for bounce engine tests.

Provides reusable scenes and parameter sets for unit and integration tests.
"""
import pytest
import numpy as np
from bounce.engine import PhysicsEngine
from bounce.params import SimulationParameters
from pipeline.create_default_scene import create_default_scene
from pipeline.scene_builder import SceneBuilder

@pytest.fixture
def default_params():
  return SimulationParameters()

@pytest.fixture
def default_scene():
  """Single reference sphere: mass 1.23, radius 0.16, r=(0, 0, 7.86), v=(0.87, 0, 1.32)."""
  return create_default_scene()

@pytest.fixture
def reference_engine(default_scene, default_params):
  return PhysicsEngine(default_scene['x'], default_scene['v'], default_scene['mass'],
                       default_scene['radius'], default_params)

@pytest.fixture
def dropped_engine():
  """Sphere released at rest 1 m above the floor with gravity switched on.

  Returns:
    PhysicsEngine with G = 9.81 and the reference contact constants
  """
  scene = SceneBuilder().add_body(position=[1.0, 0.0, 1.0], velocity=[0.0, 0.0, 0.0],
                                  mass=1.23, radius=0.16).build()
  params = SimulationParameters(gravity=9.81)
  return PhysicsEngine(scene['x'], scene['v'], scene['mass'], scene['radius'], params)

@pytest.fixture
def free_flight_engine():
  """Sphere well inside every boundary, moving slowly, no gravity."""
  x = np.array([[1.0, 0.0, 5.0]])
  v = np.array([[0.1, -0.2, 0.3]])
  return PhysicsEngine(x, v, np.array([2.0]), np.array([0.25]), SimulationParameters())
