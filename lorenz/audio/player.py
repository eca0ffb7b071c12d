"""
Looping audio file playback using sounddevice
"""

import logging
import threading
from pathlib import Path
from typing import Optional, Union

import numpy as np
import soundfile as sf

logger = logging.getLogger(__name__)


class LoopingPlayer:
    """Plays one audio file in an endless loop, best-effort"""

    def __init__(
        self,
        path: Union[str, Path],
        volume: float = 1.0,
        blocksize: int = 1024,
        device: Optional[int] = None,
    ):
        """
        Args:
            path: Audio file to decode (any format libsndfile supports)
            volume: Linear gain applied to every frame
            blocksize: Frames per output callback
            device: sounddevice output device index (None = system default)
        """
        self.path = Path(path)
        self.volume = float(volume)
        self.blocksize = blocksize
        self.device = device

        self.data: Optional[np.ndarray] = None
        self.sample_rate: Optional[int] = None
        self.position = 0
        self.stream = None
        self._lock = threading.Lock()

    @property
    def channels(self) -> int:
        return 0 if self.data is None else self.data.shape[1]

    def load(self):
        """Decode the whole file into memory as float32 frames"""
        data, sample_rate = sf.read(str(self.path), dtype="float32", always_2d=True)
        if len(data) == 0:
            raise ValueError(f"{self.path} contains no audio frames")
        self.data = data
        self.sample_rate = sample_rate
        self.position = 0
        logger.debug(
            "Loaded %s: %d frames, %d ch @ %d Hz",
            self.path, len(data), data.shape[1], sample_rate,
        )

    def fill(self, outdata: np.ndarray, frames: int):
        """Write the next `frames` frames into outdata, wrapping at end of file"""
        with self._lock:
            data = self.data
            total = len(data)
            written = 0
            while written < frames:
                chunk = min(frames - written, total - self.position)
                outdata[written:written + chunk] = data[self.position:self.position + chunk] * self.volume
                written += chunk
                self.position = (self.position + chunk) % total

    def start(self) -> bool:
        """
        Start looping playback

        Returns:
            True if the stream is running, False if the file or the audio
            device could not be opened (the failure is logged)
        """
        if self.is_active():
            return True
        try:
            if self.data is None:
                self.load()

            # Imported lazily: PortAudio may be missing on headless machines
            import sounddevice as sd

            def audio_callback(outdata, frames, time_info, status):
                if status:
                    logger.debug("Audio status: %s", status)
                self.fill(outdata, frames)

            self.stream = sd.OutputStream(
                samplerate=self.sample_rate,
                blocksize=self.blocksize,
                device=self.device,
                channels=self.channels,
                dtype="float32",
                callback=audio_callback,
            )
            self.stream.start()
        except Exception as e:
            logger.warning("Audio playback unavailable for %s: %s", self.path, e)
            self._close_stream()
            return False

        logger.info("Looping %s", self.path)
        return True

    def stop(self):
        """Stop playback and release the device"""
        if self.stream is not None:
            self._close_stream()
            logger.info("Audio stopped")

    def _close_stream(self):
        stream, self.stream = self.stream, None
        if stream is None:
            return
        try:
            stream.stop()
            stream.close()
        except Exception as e:
            logger.warning("Error closing audio stream: %s", e)

    def is_active(self) -> bool:
        """Check if stream is active"""
        return self.stream is not None and self.stream.active
