"""
Lorenz system integrator and trail history

Explicit Euler stepping of the Lorenz equations. Each step projects the new
position to screen space and records it, with a hue derived from z, in a
bounded FIFO history that the renderer draws.
"""

import colorsys
import math
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Iterator, Tuple

DEFAULT_HISTORY_SIZE = 5000
DEFAULT_INITIAL_STATE = (0.01, 0.0, 0.0)

RGB = Tuple[int, int, int]


@dataclass(frozen=True)
class LorenzParams:
    """Lorenz constants and integration time step"""
    sigma: float = 10.0
    rho: float = 28.0
    beta: float = 8.0 / 3.0
    dt: float = 0.01


@dataclass(frozen=True)
class TrailPoint:
    """One projected point of the trajectory with its colour"""
    screen_x: int
    screen_y: int
    color: RGB
    x: float
    y: float
    z: float


class HistoryBuffer:
    """Bounded, insertion-ordered trail of points (oldest evicted first)"""

    def __init__(self, capacity: int = DEFAULT_HISTORY_SIZE):
        if capacity < 1:
            raise ValueError(f"History capacity must be >= 1, got {capacity}")
        self.capacity = capacity
        self._points: Deque[TrailPoint] = deque(maxlen=capacity)

    def append(self, point: TrailPoint):
        self._points.append(point)

    def clear(self):
        self._points.clear()

    def snapshot(self) -> Tuple[TrailPoint, ...]:
        """Immutable copy for readers that must not see later appends"""
        return tuple(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[TrailPoint]:
        return iter(self._points)

    def __getitem__(self, index: int) -> TrailPoint:
        return self._points[index]


@dataclass
class SimulationState:
    """
    Mutable simulation state, advanced in place by step()

    Attributes:
        x, y, z: Current position on the attractor
        params: Lorenz constants, fixed for the lifetime of the state
        width, height: Viewport size used to project new points
        scale: Pixels per world unit
        history: Trail of projected points
        steps: Number of steps taken since creation or the last reset
    """
    x: float = DEFAULT_INITIAL_STATE[0]
    y: float = DEFAULT_INITIAL_STATE[1]
    z: float = DEFAULT_INITIAL_STATE[2]
    params: LorenzParams = field(default_factory=LorenzParams)
    width: int = 800
    height: int = 600
    scale: float = 10.0
    history: HistoryBuffer = field(default_factory=HistoryBuffer)
    steps: int = 0
    initial: Tuple[float, float, float] = field(init=False, repr=False)

    def __post_init__(self):
        self.initial = (self.x, self.y, self.z)

    @classmethod
    def from_config(cls, config: dict) -> "SimulationState":
        """Build a state from the 'simulation' and 'display' config sections"""
        sim = config.get("simulation", {})
        display = config.get("display", {})
        params = LorenzParams(
            sigma=float(sim.get("sigma", 10.0)),
            rho=float(sim.get("rho", 28.0)),
            beta=float(sim.get("beta", 8.0 / 3.0)),
            dt=float(sim.get("dt", 0.01)),
        )
        x, y, z = (float(v) for v in sim.get("initial_state", DEFAULT_INITIAL_STATE))
        return cls(
            x=x, y=y, z=z,
            params=params,
            width=int(display.get("width", 800)),
            height=int(display.get("height", 600)),
            scale=float(sim.get("scale", 10.0)),
            history=HistoryBuffer(int(sim.get("history_size", DEFAULT_HISTORY_SIZE))),
        )

    @property
    def position(self) -> Tuple[float, float, float]:
        return self.x, self.y, self.z

    def project(self, x: float, y: float) -> Tuple[int, int]:
        """Map world (x, y) to integer screen coordinates, truncating toward zero"""
        return (
            self.width // 2 + int(x * self.scale),
            self.height // 2 + int(y * self.scale),
        )

    def resize(self, width: int, height: int):
        """Change the viewport for future points; buffered points keep their coordinates"""
        self.width = int(width)
        self.height = int(height)

    def reset(self):
        """Return to the initial position and drop the trail"""
        self.x, self.y, self.z = self.initial
        self.history.clear()
        self.steps = 0


def hue_to_rgb(hue: float) -> RGB:
    """
    Convert a hue to a fully saturated, full brightness RGB colour.

    Hues outside [0, 1) wrap around (only the fractional part counts),
    so z values beyond the usual attractor range cycle through the
    colour wheel again instead of sticking to red.

    Computed in double precision; AWT's getHSBColor uses float32, so an
    occasional channel can differ from it by one unit.
    """
    h = hue - math.floor(hue)
    r, g, b = colorsys.hsv_to_rgb(h, 1.0, 1.0)
    return int(r * 255 + 0.5), int(g * 255 + 0.5), int(b * 255 + 0.5)


def z_to_hue(z: float) -> float:
    return (z + 30.0) / 60.0


def step(state: SimulationState) -> TrailPoint:
    """
    Advance the state by one explicit Euler step and record the new point.

    Args:
        state: Simulation state, mutated in place

    Returns:
        The TrailPoint appended to state.history
    """
    p = state.params
    x, y, z = state.x, state.y, state.z

    dx = p.sigma * (y - x)
    dy = x * (p.rho - z) - y
    dz = x * y - p.beta * z

    state.x = x + dx * p.dt
    state.y = y + dy * p.dt
    state.z = z + dz * p.dt

    screen_x, screen_y = state.project(state.x, state.y)
    point = TrailPoint(
        screen_x=screen_x,
        screen_y=screen_y,
        color=hue_to_rgb(z_to_hue(state.z)),
        x=state.x,
        y=state.y,
        z=state.z,
    )
    state.history.append(point)
    state.steps += 1
    return point
