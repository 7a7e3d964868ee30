from .types import Body, ExecutionMode, create_soa_body_data
from .params import SimulationParameters
from .forces import compute_forces, penetration_depths
from .integration import half_step_velocity, leapfrog_step
from .engine import PhysicsEngine, create_engine

__all__ = ['Body', 'ExecutionMode', 'create_soa_body_data', 'SimulationParameters',
           'compute_forces', 'penetration_depths', 'half_step_velocity', 'leapfrog_step',
           'PhysicsEngine', 'create_engine']
