# audio.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict

import numpy as np  # type: ignore
import pygame       # type: ignore

SAMPLE_RATE = 22050


@dataclass(frozen=True)
class Tone:
    """A short synthesized cue: exponential pitch and gain ramps over `duration` seconds."""
    waveform: str        # "sine" | "sawtooth"
    freq_start: float
    freq_end: float
    duration: float
    gain_start: float = 0.1
    gain_end: float = 0.01


CUES: Dict[str, Tone] = {
    "eat":    Tone("sine",     600.0, 1000.0, 0.1),
    "defeat": Tone("sawtooth", 100.0,   50.0, 0.3),
}


def _exp_ramp(start: float, end: float, n: int) -> np.ndarray:
    return start * (end / start) ** np.linspace(0.0, 1.0, n, endpoint=False)


def synth_tone(tone: Tone, sample_rate: int = SAMPLE_RATE) -> np.ndarray:
    """Render a Tone to mono 16-bit samples."""
    n = max(int(sample_rate * tone.duration), 1)
    freq = _exp_ramp(tone.freq_start, tone.freq_end, n)
    gain = _exp_ramp(tone.gain_start, tone.gain_end, n)

    # Integrate the swept frequency to get phase in cycles
    cycles = np.cumsum(freq) / sample_rate
    if tone.waveform == "sine":
        wave = np.sin(2.0 * np.pi * cycles)
    elif tone.waveform == "sawtooth":
        wave = 2.0 * (cycles - np.floor(cycles + 0.5))
    else:
        raise ValueError(f"Unknown waveform: {tone.waveform}")

    return (wave * gain * 32767).astype(np.int16)


class SoundBoard:
    """
    Fire-and-forget "eat" / "defeat" cues.
    Falls back to silence when disabled or when the mixer cannot start.
    """

    def __init__(self, enabled: bool = True):
        self.enabled = False
        self._sounds: Dict[str, pygame.mixer.Sound] = {}

        if not enabled:
            print("[AUDIO] Sound disabled")
            return

        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1)
            freq, _size, channels = pygame.mixer.get_init()
            for name, tone in CUES.items():
                samples = synth_tone(tone, freq)
                if channels > 1:
                    samples = np.repeat(samples[:, None], channels, axis=1)
                self._sounds[name] = pygame.sndarray.make_sound(samples)
        except (pygame.error, TypeError) as exc:
            # TypeError: get_init() returned None after a failed init
            print(f"[AUDIO] Mixer unavailable ({exc}); playing silently")
            self._sounds.clear()
            return

        self.enabled = True

    def play(self, cue: str) -> None:
        if cue not in CUES:
            raise ValueError(f"Unknown sound cue: {cue}")
        if not self.enabled:
            return
        self._sounds[cue].play()
