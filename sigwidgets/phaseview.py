"""Phase and angle-of-arrival view model: sample history and line layout."""

from __future__ import annotations

import cmath
import math
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

DEFAULT_HISTORY_SIZE = 256
DEFAULT_BACKGROUND_COLOR = (0, 0, 0)
DEFAULT_FOREGROUND_COLOR = (255, 255, 255)
DEFAULT_TEXT_COLOR = (255, 255, 255)
DEFAULT_AXES_COLOR = (128, 128, 128)

COLOR_TABLE_SIZE = 1024
MAG_TICKS = 5
ANG_TICKS = 48
SHRINK = 0.8
ANG_TICK_F1 = 1.1
ANG_TICK_F2 = 1.15
TICK_RADIUS = 0.5 * (ANG_TICK_F1 + ANG_TICK_F2)

Point = Tuple[int, int]
PointF = Tuple[float, float]


def phase_to_color_index(angle: float) -> int:
    """Index into a 1024-entry hue table for a phase in radians."""
    if angle < 0:
        angle += 2 * math.pi
    scaled = COLOR_TABLE_SIZE * angle / (2 * math.pi)
    if math.isnan(scaled):
        return 0
    if math.isinf(scaled):
        return COLOR_TABLE_SIZE - 1 if scaled > 0 else 0
    return max(0, min(int(math.floor(scaled)), COLOR_TABLE_SIZE - 1))


class SampleRing:
    """Fixed-size circular history of complex samples."""

    def __init__(self, size: int = DEFAULT_HISTORY_SIZE) -> None:
        self._buffer: List[complex] = []
        self._ptr = 0
        self._amount = 0
        self.resize(size)

    @property
    def size(self) -> int:
        """Capacity of the ring."""
        return len(self._buffer)

    def resize(self, size: int) -> None:
        """Change the capacity, discarding all stored samples."""
        if size < 0:
            raise ValueError("history size cannot be negative")
        self._buffer = [0j] * size
        self._ptr = 0
        self._amount = 0

    def feed(self, samples: Sequence[complex]) -> None:
        """Append samples; only the newest ones up to the capacity are kept."""
        size = len(self._buffer)
        pending = [complex(sample) for sample in samples]
        if len(pending) > size:
            pending = pending[len(pending) - size:]

        while pending:
            chunk = min(size - self._ptr, len(pending))
            self._buffer[self._ptr:self._ptr + chunk] = pending[:chunk]
            pending = pending[chunk:]
            self._ptr += chunk
            self._amount = min(self._amount + chunk, size)
            if self._ptr == size:
                self._ptr = 0

    def samples(self) -> List[complex]:
        """Stored samples, oldest first."""
        size = len(self._buffer)
        ordered = self._buffer[self._ptr:] + self._buffer[:self._ptr]
        return ordered[size - self._amount:]

    def __len__(self) -> int:
        return self._amount


@dataclass(frozen=True)
class PhaseLine:
    """A line from the centre towards one sample in phase mode."""

    end: Point
    color_index: int
    alpha: int


@dataclass(frozen=True)
class AoALine:
    """The two candidate directions of one sample in angle-of-arrival mode."""

    ends: Tuple[Point, Point]
    alpha: int


class PhaseView:
    """Polar view of complex samples, fading older ones out."""

    def __init__(
        self,
        width: int = 0,
        height: int = 0,
        history_size: int = DEFAULT_HISTORY_SIZE,
    ) -> None:
        if width < 0 or height < 0:
            raise ValueError("view size cannot be negative")
        self.width = width
        self.height = height
        self.history = SampleRing(history_size)
        self.zoom = 1.0
        self.gain = 1.0
        self.phase_scale = math.pi
        self.aoa = False
        self.background = DEFAULT_BACKGROUND_COLOR
        self.foreground = DEFAULT_FOREGROUND_COLOR
        self.text = DEFAULT_TEXT_COLOR
        self.axes = DEFAULT_AXES_COLOR

    @property
    def center(self) -> Point:
        """Screen position of the origin."""
        return self.width // 2, self.height // 2

    def set_history_size(self, length: int) -> None:
        """Change how many samples are kept, discarding the current ones."""
        self.history.resize(length)

    def feed(self, samples: Sequence[complex]) -> None:
        """Add samples to the history."""
        self.history.feed(samples)

    def screen_point(self, x: float, y: float) -> Point:
        """Screen coordinates of a point, clipped to the unit circle after zoom."""
        norm = math.hypot(x, y)
        if self.zoom * norm > 1:
            x /= self.zoom * norm
            y /= self.zoom * norm
        ox, oy = self.center
        return (
            ox + int(0.5 * SHRINK * self.width * self.zoom * x),
            oy - int(0.5 * SHRINK * self.height * self.zoom * y),
        )

    def magnitude_circles(self) -> List[PointF]:
        """Radii (horizontal, vertical) of the concentric magnitude circles."""
        kx = 0.5 * SHRINK * self.width * self.zoom / MAG_TICKS
        ky = 0.5 * SHRINK * self.height * self.zoom / MAG_TICKS
        return [(kx * i, ky * i) for i in range(1, MAG_TICKS + 1)]

    def angular_ticks(self) -> List[Tuple[PointF, PointF]]:
        """The short radial tick marks around the outer circle."""
        ox, oy = self.center
        delta = 2 * math.pi / ANG_TICKS
        ticks = []
        for i in range(ANG_TICKS):
            x = 0.5 * SHRINK * self.width * math.cos(i * delta)
            y = 0.5 * SHRINK * self.height * math.sin(i * delta)
            ticks.append(
                (
                    (ox + ANG_TICK_F1 * x, oy - ANG_TICK_F1 * y),
                    (ox + ANG_TICK_F2 * x, oy - ANG_TICK_F2 * y),
                )
            )
        return ticks

    def _aged(self) -> Iterable[Tuple[float, complex]]:
        size = self.history.size
        skip = size - len(self.history)
        for p, sample in enumerate(self.history.samples(), start=1):
            yield (p + skip) / size, self.gain * sample

    def phase_lines(self) -> List[PhaseLine]:
        """One coloured line per stored sample, oldest first."""
        lines = []
        for age, c in self._aged():
            lines.append(
                PhaseLine(
                    end=self.screen_point(c.real, c.imag),
                    color_index=phase_to_color_index(cmath.phase(c)),
                    alpha=int(255 * age * age),
                )
            )
        return lines

    def _arrival_angle(self, phase: float) -> Optional[float]:
        ratio = phase / self.phase_scale
        if not -1 <= ratio <= 1:
            return None
        return math.asin(ratio)

    def aoa_lines(self) -> List[AoALine]:
        """Forward and backward direction pairs per stored sample, oldest first.

        Samples whose phase falls outside the phase scale have no direction
        and are left out.
        """
        lines = []
        for age, c in self._aged():
            angle = self._arrival_angle(cmath.phase(c))
            if angle is None:
                continue
            mag = abs(c)
            x = mag * math.cos(angle)
            y = mag * math.sin(angle)
            lines.append(
                AoALine(
                    ends=(self.screen_point(-y, x), self.screen_point(-y, -x)),
                    alpha=int(255 * age ** 4),
                )
            )
        return lines