"""Streaming GIF decoder that reads frames from a seekable binary file."""

from __future__ import annotations

import logging
import struct
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import BinaryIO, Optional

_log = logging.getLogger(__name__)

_NO_PREFIX = 0xFFF
_MAX_ENTRIES = 0x1000
_MAX_KEY_SIZE = 11
_TRANSPARENT_RGB = bytes((0x00, 0x24, 0x00))

_EXTENSION_INTRODUCER = 0x21
_IMAGE_SEPARATOR = 0x2C
_TRAILER = 0x3B


class GifFormatError(ValueError):
    """Raised when GIF data is malformed or ends too early."""


@dataclass
class Palette:
    """Colour table of up to 256 RGB entries."""

    size: int = 0
    colors: bytearray = field(default_factory=lambda: bytearray(0x100 * 3))

    def color(self, index: int) -> bytes:
        """Return the RGB triple at ``index``."""
        return bytes(self.colors[index * 3 : index * 3 + 3])


@dataclass
class GraphicControl:
    """Contents of the most recent graphic control extension."""

    delay: int = 0
    tindex: int = 0
    disposal: int = 0
    input: bool = False
    transparency: bool = False


PlainTextHook = Callable[["GifDecoder", int, int, int, int, int, int, int, int], object]
CommentHook = Callable[["GifDecoder"], object]
ApplicationHook = Callable[["GifDecoder", bytes, bytes], object]


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def _interlaced_line_index(h: int, y: int) -> int:
    """Output row of the ``y``-th stored line of an interlaced frame of height ``h``."""
    p = _trunc_div(h - 1, 8) + 1
    if y < p:
        return y * 8
    y -= p
    p = _trunc_div(h - 5, 8) + 1
    if y < p:
        return y * 8 + 4
    y -= p
    p = _trunc_div(h - 3, 4) + 1
    if y < p:
        return y * 4 + 2
    y -= p
    return y * 2 + 1


class _KeyReader:
    """Reads variable-width LZW codes from GIF data sub-blocks."""

    def __init__(self, decoder: GifDecoder) -> None:
        self._decoder = decoder
        self.sub_len = 0
        self.shift = 0
        self.byte = 0

    def read(self, key_size: int) -> int:
        key = 0
        bits_read = 0
        while bits_read < key_size:
            rpad = (self.shift + bits_read) % 8
            if rpad == 0:
                if self.sub_len == 0:
                    self.sub_len = self._decoder._read_byte()
                self.byte = self._decoder._read_byte()
                self.sub_len = (self.sub_len - 1) & 0xFF
            frag_size = min(key_size - bits_read, 8 - rpad)
            key |= (self.byte >> rpad) << bits_read
            bits_read += frag_size
        key &= (1 << key_size) - 1
        self.shift = (self.shift + key_size) % 8
        return key


class GifDecoder:
    """Decodes a GIF file frame by frame onto an RGB canvas.

    The header and global colour table are read on construction. Each call
    to :meth:`get_frame` reads the next image; :meth:`render_frame` returns
    the current picture.
    """

    def __init__(self, fd: BinaryIO, old_transparency: bool = False) -> None:
        self.fd = fd
        self.old_transparency = old_transparency
        self.plain_text: Optional[PlainTextHook] = None
        self.comment: Optional[CommentHook] = None
        self.application: Optional[ApplicationHook] = None

        if self._read_exact(3) != b"GIF":
            raise GifFormatError("invalid signature")
        self.version = self._read_exact(3)

        self.width = self._read_num()
        self.height = self._read_num()
        fdsz = self._read_byte()
        gct_present = bool(fdsz & 0x80)
        self.depth = ((fdsz >> 4) & 7) + 1
        gct_size = 1 << ((fdsz & 0x07) + 1)
        self.bgindex = self._read_byte()
        self._read_byte()  # aspect ratio

        self.loop_count = 0
        self.gce = GraphicControl()
        self.gct = Palette()
        self.lct = Palette()
        if gct_present:
            self.gct.size = gct_size
            self.gct.colors[: 3 * gct_size] = self._read_exact(3 * gct_size)
        self.palette = self.gct

        pixels = self.width * self.height
        self.frame = bytearray([self.bgindex]) * pixels
        bgcolor = self.palette.color(self.bgindex)
        if any(bgcolor):
            self.canvas = bytearray(bgcolor * pixels)
        else:
            self.canvas = bytearray(3 * pixels)

        self.fx = self.fy = self.fw = self.fh = 0
        self.anim_start = self.fd.tell()

    # Low-level reading

    def _read_exact(self, count: int) -> bytes:
        data = self.fd.read(count)
        if len(data) != count:
            raise GifFormatError("unexpected end of GIF data")
        return data

    def _read_byte(self) -> int:
        return self._read_exact(1)[0]

    def _read_num(self) -> int:
        return struct.unpack("<H", self._read_exact(2))[0]

    def _skip(self, count: int) -> None:
        self.fd.seek(count, 1)

    def _discard_sub_blocks(self) -> None:
        while True:
            size = self._read_byte()
            self._skip(size)
            if size == 0:
                break

    # Extensions

    def _read_plain_text_ext(self) -> None:
        if self.plain_text is not None:
            self._skip(1)
            tx, ty, tw, th = (self._read_num() for _ in range(4))
            cw, ch, fg, bg = self._read_exact(4)
            sub_block = self.fd.tell()
            self.plain_text(self, tx, ty, tw, th, cw, ch, fg, bg)
            self.fd.seek(sub_block)
        else:
            self._skip(13)
        self._discard_sub_blocks()

    def _read_graphic_control_ext(self) -> None:
        self._skip(1)
        rdit = self._read_byte()
        self.gce.disposal = (rdit >> 2) & 3
        self.gce.input = bool(rdit & 2)
        self.gce.transparency = bool(rdit & 1)
        self.gce.delay = self._read_num()
        self.gce.tindex = self._read_byte()
        self._skip(1)

    def _read_comment_ext(self) -> None:
        if self.comment is not None:
            sub_block = self.fd.tell()
            self.comment(self)
            self.fd.seek(sub_block)
        self._discard_sub_blocks()

    def _read_application_ext(self) -> None:
        self._skip(1)
        app_id = self._read_exact(8)
        auth_code = self._read_exact(3)
        if app_id == b"NETSCAPE":
            self._skip(2)
            self.loop_count = self._read_num()
            self._skip(1)
        elif self.application is not None:
            sub_block = self.fd.tell()
            self.application(self, app_id, auth_code)
            self.fd.seek(sub_block)
            self._discard_sub_blocks()
        else:
            self._discard_sub_blocks()

    def _read_ext(self) -> None:
        label = self._read_byte()
        if label == 0x01:
            self._read_plain_text_ext()
        elif label == 0xF9:
            self._read_graphic_control_ext()
        elif label == 0xFE:
            self._read_comment_ext()
        elif label == 0xFF:
            self._read_application_ext()
        else:
            _log.warning("unknown extension: %02X", label)

    # Image data

    def _read_image_data(self, interlace: bool) -> None:
        key_size = self._read_byte()
        if key_size > _MAX_KEY_SIZE:
            raise GifFormatError(f"invalid LZW minimum code size {key_size}")
        start = self.fd.tell()
        self._discard_sub_blocks()
        end = self.fd.tell()
        self.fd.seek(start)

        clear = 1 << key_size
        stop = clear + 1
        lengths = [0] * _MAX_ENTRIES
        prefixes = [0] * _MAX_ENTRIES
        suffixes = [0] * _MAX_ENTRIES
        for code in range(clear):
            lengths[code] = 1
            prefixes[code] = _NO_PREFIX
            suffixes[code] = code & 0xFF
        nentries = clear + 2

        key_size += 1
        init_key_size = key_size
        reader = _KeyReader(self)
        key = reader.read(key_size)
        frm_off = 0
        ret = 0
        table_is_full = False
        str_len = 0
        suffix = 0

        try:
            while True:
                if key == clear:
                    key_size = init_key_size
                    nentries = (1 << (key_size - 1)) + 2
                    table_is_full = False
                elif not table_is_full:
                    lengths[nentries] = str_len + 1
                    prefixes[nentries] = key
                    suffixes[nentries] = suffix
                    nentries += 1
                    ret = 1 if nentries & (nentries - 1) == 0 else 0
                    if nentries == _MAX_ENTRIES:
                        ret = 0
                        table_is_full = True

                key = reader.read(key_size)
                if key == clear:
                    continue
                if key == stop:
                    break
                if ret == 1:
                    key_size += 1

                entry = key
                str_len = lengths[entry]
                for _ in range(_MAX_ENTRIES + 1):
                    p = frm_off + lengths[entry] - 1
                    x = p % self.fw
                    y = p // self.fw
                    if interlace:
                        y = _interlaced_line_index(self.fh, y)
                    self.frame[(self.fy + y) * self.width + self.fx + x] = suffixes[entry]
                    suffix = suffixes[entry]
                    if prefixes[entry] == _NO_PREFIX:
                        break
                    entry = prefixes[entry]
                else:
                    raise GifFormatError("cyclic LZW code table")
                frm_off += str_len
                if key < nentries - 1 and not table_is_full:
                    suffixes[nentries - 1] = suffix
        except (IndexError, ZeroDivisionError) as exc:
            raise GifFormatError("corrupt LZW image data") from exc

        self._read_byte()  # block terminator
        self.fd.seek(end)

    def _read_image(self) -> None:
        self.fx = self._read_num()
        self.fy = self._read_num()
        self.fw = self._read_num()
        self.fh = self._read_num()
        if self.fx + self.fw > self.width or self.fy + self.fh > self.height:
            raise GifFormatError("frame lies outside the logical screen")
        fisrz = self._read_byte()
        interlace = bool(fisrz & 0x40)
        if fisrz & 0x80:
            self.lct.size = 1 << ((fisrz & 0x07) + 1)
            self.lct.colors[: 3 * self.lct.size] = self._read_exact(3 * self.lct.size)
            self.palette = self.lct
        else:
            self.palette = self.gct
        self._read_image_data(interlace)

    # Rendering

    def _render_frame_rect(self, buffer: bytearray, monochrome: bool) -> None:
        colors = self.palette.colors
        transparency = self.gce.transparency
        tindex = self.gce.tindex
        for j in range(self.fh):
            row = (self.fy + j) * self.width + self.fx
            for i in range(row, row + self.fw):
                index = self.frame[i]
                if not transparency or index != tindex:
                    if monochrome:
                        buffer[i] = colors[index * 3]
                    else:
                        buffer[i * 3 : i * 3 + 3] = colors[index * 3 : index * 3 + 3]
                elif not monochrome and not self.old_transparency:
                    buffer[i * 3 : i * 3 + 3] = _TRANSPARENT_RGB

    def _dispose(self) -> None:
        disposal = self.gce.disposal
        if disposal == 2:
            bgcolor = self.palette.color(self.bgindex)
            for j in range(self.fh):
                row = (self.fy + j) * self.width + self.fx
                self.canvas[row * 3 : (row + self.fw) * 3] = bgcolor * self.fw
        elif disposal == 3:
            pass
        else:
            self._render_frame_rect(self.canvas, False)

    def get_frame(self) -> bool:
        """Read the next frame.

        Returns True if a frame was read and False at the GIF trailer.
        Raises GifFormatError on malformed data.
        """
        self._dispose()
        sep = self._read_byte()
        while sep != _IMAGE_SEPARATOR:
            if sep == _TRAILER:
                return False
            if sep != _EXTENSION_INTRODUCER:
                raise GifFormatError(f"unexpected block separator 0x{sep:02X}")
            self._read_ext()
            sep = self._read_byte()
        self._read_image()
        return True

    def render_frame(self, monochrome: bool = True) -> bytes:
        """Return the current picture.

        Monochrome output has one byte per pixel, otherwise three (RGB).
        """
        pixels = self.width * self.height
        if monochrome:
            buffer = bytearray(self.canvas[:pixels])
        else:
            if not self.old_transparency:
                self.canvas[:] = _TRANSPARENT_RGB * pixels
            buffer = bytearray(self.canvas)
        self._render_frame_rect(buffer, monochrome)
        return bytes(buffer)

    def is_bgcolor(self, color: bytes | tuple[int, int, int]) -> bool:
        """Whether ``color`` equals the background colour of the current palette."""
        return self.palette.color(self.bgindex) == bytes(color)

    def rewind(self) -> None:
        """Go back to the first frame."""
        self.fd.seek(self.anim_start)