"""
Lorenz system controller - ties the simulation to the audio loop
"""

import logging
from typing import Optional

from .integrator import SimulationState, TrailPoint, step
from ..audio.player import LoopingPlayer

logger = logging.getLogger(__name__)


class LorenzController:
    """Owns the simulation state and the background audio"""

    def __init__(self, config: dict = None):
        self.config = config or {}
        self.state = SimulationState.from_config(self.config)

        audio_config = self.config.get("audio", {})
        self.audio_enabled = audio_config.get("enabled", True)
        self.player: Optional[LoopingPlayer] = None
        if self.audio_enabled:
            self.player = LoopingPlayer(
                audio_config.get("file", "zimmer.wav"),
                volume=audio_config.get("volume", 1.0),
                blocksize=audio_config.get("blocksize", 1024),
            )

    def initialize(self) -> bool:
        """Start background audio; the visualization runs whether or not it succeeds"""
        if self.player is not None:
            self.player.start()
        else:
            logger.info("Audio disabled")
        p = self.state.params
        logger.info(
            "Lorenz sigma=%g rho=%g beta=%.4f dt=%g, start %s, history %d",
            p.sigma, p.rho, p.beta, p.dt, self.state.position, self.state.history.capacity,
        )
        return True

    def reset(self):
        """Restart the trajectory from its initial position"""
        self.state.reset()
        logger.info("Trajectory reset to %s", self.state.position)

    def tick(self) -> TrailPoint:
        """Advance the simulation by one step"""
        return step(self.state)

    def shutdown(self):
        """Release the audio device"""
        if self.player is not None:
            self.player.stop()
