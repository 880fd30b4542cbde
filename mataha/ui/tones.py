"""PCM synthesis of the short feedback tones (16-bit signed mono)."""

from __future__ import annotations

from typing import Callable, Dict, Optional, Sequence

import numpy as np

SAMPLE_RATE = 22050
FLOOR_GAIN = 0.0001

# (frequency Hz, waveform, duration s, peak gain)
MOVE_TONE = (500.0, "square", 0.1, 0.1)
STAR_TONE = (783.99, "triangle", 0.3, 0.2)
WIN_NOTES = (261.63, 329.63, 392.00, 523.25)  # C4 E4 G4 C5
WIN_NOTE_DURATION = 0.12
WIN_NOTE_GAIN = 0.2


def _sine(phase: np.ndarray) -> np.ndarray:
    return np.sin(2 * np.pi * phase)


def _square(phase: np.ndarray) -> np.ndarray:
    return np.where(np.mod(phase, 1.0) < 0.5, 1.0, -1.0)


def _triangle(phase: np.ndarray) -> np.ndarray:
    p = np.mod(phase, 1.0)
    return np.where(p < 0.5, 4 * p - 1, 3 - 4 * p)


WAVEFORMS: Dict[str, Callable[[np.ndarray], np.ndarray]] = {
    "sine": _sine,
    "square": _square,
    "triangle": _triangle,
}


def synthesize(
    frequency: float,
    waveform: str,
    duration: float,
    gain: float,
    sample_rate: int = SAMPLE_RATE,
    ramp: Optional[float] = None,
) -> np.ndarray:
    """One note with an exponential decay from ``gain`` to silence over ``ramp`` seconds."""
    try:
        wave = WAVEFORMS[waveform]
    except KeyError:
        raise ValueError(f"unknown waveform {waveform!r}") from None
    ramp = duration if ramp is None else ramp
    t = np.arange(int(duration * sample_rate)) / sample_rate
    envelope = np.where(t < ramp, gain * (FLOOR_GAIN / gain) ** (t / ramp), 0.0)
    return (np.clip(wave(frequency * t) * envelope, -1.0, 1.0) * 32767).astype(np.int16)


def arpeggio(notes: Sequence[float], note_duration: float, gain: float, sample_rate: int = SAMPLE_RATE) -> np.ndarray:
    return np.concatenate(
        [synthesize(note, "sine", note_duration, gain, sample_rate, ramp=note_duration * 0.9) for note in notes]
    )


def move_tone(sample_rate: int = SAMPLE_RATE) -> np.ndarray:
    freq, wave, duration, gain = MOVE_TONE
    return synthesize(freq, wave, duration, gain, sample_rate)


def star_tone(sample_rate: int = SAMPLE_RATE) -> np.ndarray:
    freq, wave, duration, gain = STAR_TONE
    return synthesize(freq, wave, duration, gain, sample_rate)


def win_tone(sample_rate: int = SAMPLE_RATE) -> np.ndarray:
    return arpeggio(WIN_NOTES, WIN_NOTE_DURATION, WIN_NOTE_GAIN, sample_rate)
