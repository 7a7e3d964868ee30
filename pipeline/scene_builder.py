import numpy as np
from typing import Optional
from bounce.types import Body, create_soa_body_data
from pipeline.error_handler import ConfigurationError, validate_positive_number, validate_vector3


class SceneBuilder:
    
    def __init__(self):
        self.bodies: list[Body] = []
    
    def add_body(self, position: np.ndarray, mass: float, radius: float,
                 velocity: Optional[np.ndarray] = None) -> 'SceneBuilder':
        position = validate_vector3(position, "Position")
        
        if velocity is None:
            velocity = np.zeros(3, dtype=np.float64)
        else:
            velocity = validate_vector3(velocity, "Velocity")
        
        validate_positive_number(mass, "Mass")
        validate_positive_number(radius, "Radius")
        
        self.bodies.append(Body(mass=mass, radius=radius, r=position, v=velocity))
        
        return self
    
    def build(self) -> dict[str, np.ndarray]:
        if not self.bodies:
            raise ConfigurationError("Cannot build empty scene. Add at least one body first.")
        
        return create_soa_body_data(self.bodies)
    
    def clear(self) -> 'SceneBuilder':
        self.bodies.clear()
        return self
    
    def __len__(self) -> int:
        return len(self.bodies)
