"""Animated GIF playback on top of the frame decoder."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import BinaryIO, Optional

from circuitos.gifdec import GifDecoder, GifFormatError


class LoopMode(enum.Enum):
    """How playback continues after the last frame."""

    AUTO = "auto"
    SINGLE = "single"
    INFINITE = "infinite"


@dataclass(frozen=True)
class Frame:
    """One rendered frame; ``data`` holds RGB bytes, ``duration`` is in ms."""

    width: int = 0
    height: int = 0
    duration: int = 0
    data: bytes = b""


class GIF:
    """Plays back a GIF file frame by frame.

    A GIF built without a file is empty and evaluates as false.
    """

    def __init__(self, file: Optional[BinaryIO] = None) -> None:
        self._decoder: Optional[GifDecoder] = None
        self.loop_mode = LoopMode.AUTO
        self._loop_count = 0
        if file is None:
            return
        file.seek(0)
        self._decoder = GifDecoder(file)

    def __bool__(self) -> bool:
        return self._decoder is not None

    @property
    def width(self) -> int:
        return self._decoder.width if self._decoder is not None else 0

    @property
    def height(self) -> int:
        return self._decoder.height if self._decoder is not None else 0

    @property
    def loop_count(self) -> int:
        """How many times playback has reached the end."""
        return self._loop_count

    def _advance(self) -> bool:
        try:
            return self._decoder.get_frame()
        except GifFormatError:
            return False

    def next_frame(self) -> bool:
        """Advance to the next frame; return False when playback has ended."""
        if self._decoder is None:
            return False

        if not self._advance():
            self._loop_count += 1
            if self.loop_mode is LoopMode.SINGLE:
                return False
            if (
                self.loop_mode is LoopMode.AUTO
                and self._decoder.loop_count != 0
                and self._loop_count == self._decoder.loop_count
            ):
                return False
            self._decoder.rewind()
            self._advance()

        return True

    def get_frame(self) -> Frame:
        """Render the current frame."""
        if self._decoder is None:
            return Frame()
        data = self._decoder.render_frame(False)
        return Frame(self.width, self.height, self._decoder.gce.delay * 10, data)

    def frame_duration(self) -> int:
        """Duration of the current frame in milliseconds."""
        if self._decoder is None:
            return 0
        return self._decoder.gce.delay * 10

    def reset(self) -> None:
        """Restart playback from the first frame."""
        if self._decoder is None:
            return
        self._decoder.rewind()
        self._loop_count = 0