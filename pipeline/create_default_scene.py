#!/usr/bin/env python3
"""Reference initial conditions: one sphere launched up and to the right.

mass 1.23, radius 0.16, r = (0, 0, 7.86), v = (0.87, 0, 1.32).
"""
import numpy as np
from typing import Optional

from pipeline.config import PhysicsConstants, SceneConfig
from pipeline.scene_builder import SceneBuilder


def create_default_scene(overrides: Optional[SceneConfig] = None) -> dict[str, np.ndarray]:
    """Build the reference scene, optionally replacing some of its values."""
    overrides = overrides or SceneConfig()
    
    def pick(value, default):
        return default if value is None else value
    
    builder = SceneBuilder()
    builder.add_body(
        position=pick(overrides.position, PhysicsConstants.DEFAULT_POSITION),
        velocity=pick(overrides.velocity, PhysicsConstants.DEFAULT_VELOCITY),
        mass=pick(overrides.mass, PhysicsConstants.DEFAULT_MASS),
        radius=pick(overrides.radius, PhysicsConstants.DEFAULT_RADIUS)
    )
    return builder.build()


if __name__ == "__main__":
    scene = create_default_scene()
    for key, value in scene.items():
        print(f"{key}: {value.tolist()}")
