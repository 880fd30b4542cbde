"""Feedback tones played through QtMultimedia."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import numpy as np
from PySide6.QtCore import QBuffer, QByteArray, QIODevice, QObject
from PySide6.QtMultimedia import QAudio, QAudioFormat, QAudioSink, QMediaDevices

from mataha.ui import tones

logger = logging.getLogger(__name__)


class ToneFeedback(QObject):
    """AudioFeedback that synthesizes the move, star and win tones.

    Tones are rendered once up front. When the system has no audio output the
    object stays silent.
    """

    def __init__(self, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._format = QAudioFormat()
        self._format.setSampleRate(tones.SAMPLE_RATE)
        self._format.setChannelCount(1)
        self._format.setSampleFormat(QAudioFormat.SampleFormat.Int16)

        device = QMediaDevices.defaultAudioOutput()
        self._device = None if device.isNull() else device
        if self._device is None:
            logger.warning("No audio output device found; feedback tones disabled")

        self._move = self._to_bytes(tones.move_tone())
        self._star = self._to_bytes(tones.star_tone())
        self._win = self._to_bytes(tones.win_tone())
        self._playing: List[Tuple[QAudioSink, QBuffer]] = []

    def on_move(self) -> None:
        self._play(self._move)

    def on_star(self) -> None:
        self._play(self._star)

    def on_win(self) -> None:
        self._play(self._win)

    @staticmethod
    def _to_bytes(samples: np.ndarray) -> QByteArray:
        return QByteArray(samples.astype("<i2").tobytes())

    def _play(self, data: QByteArray) -> None:
        if self._device is None:
            return
        still_playing = []
        for sink, buffer in self._playing:
            if sink.state() == QAudio.State.StoppedState:
                sink.deleteLater()
                buffer.deleteLater()
            else:
                still_playing.append((sink, buffer))
        self._playing = still_playing

        buffer = QBuffer(self)
        buffer.setData(data)
        buffer.open(QIODevice.ReadOnly)
        sink = QAudioSink(self._device, self._format, self)
        sink.stateChanged.connect(lambda state, s=sink: self._on_state_changed(s, state))
        sink.start(buffer)
        self._playing.append((sink, buffer))

    def _on_state_changed(self, sink: QAudioSink, state) -> None:
        if state == QAudio.State.IdleState:
            sink.stop()
