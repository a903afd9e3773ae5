"""
Game mechanics composed by the engine: input arbitration, collision
classification, food placement and difficulty progression.
"""

from .arbiter import DirectionArbiter, validate_direction
from .collision import Collision, CollisionDetector, body_to_check
from .difficulty import DifficultyCurve
from .placement import RandomPlacer

__all__ = [
    'DirectionArbiter',
    'validate_direction',
    'Collision',
    'CollisionDetector',
    'body_to_check',
    'DifficultyCurve',
    'RandomPlacer',
]
