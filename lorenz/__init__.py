"""
Lorenz Attractor - chaotic trajectory visualizer with looping audio
"""

from .core.integrator import (
    HistoryBuffer,
    LorenzParams,
    SimulationState,
    TrailPoint,
    hue_to_rgb,
    step,
)

__version__ = "1.0.0"

__all__ = [
    "HistoryBuffer",
    "LorenzParams",
    "SimulationState",
    "TrailPoint",
    "hue_to_rgb",
    "step",
]
