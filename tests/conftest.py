from __future__ import annotations

from typing import Callable

import pytest

from pixel_buffer import WHITE, PixelBuffer


class RecordingSink:
    """Write-only sink that remembers every set_pixel call in order."""

    def __init__(self) -> None:
        self.writes: list[tuple[int, int, tuple]] = []

    def set_pixel(self, x: int, y: int, color: tuple) -> bool:
        self.writes.append((x, y, color))
        return True

    @property
    def pixels(self) -> set[tuple[int, int]]:
        return {(x, y) for x, y, _ in self.writes}


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def make_canvas() -> Callable[..., PixelBuffer]:
    def _make(width: int = 20, height: int = 20, color=WHITE) -> PixelBuffer:
        return PixelBuffer.new(width, height, color)

    return _make
