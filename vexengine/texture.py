"""Two-dimensional textures loaded from image files."""

from __future__ import annotations

import os
from typing import Union

from PIL import Image

from .core import EngineError, vex_assert
from .renderer_api import API, get_api

GL_RGB = 0x1907
GL_RGBA = 0x1908
GL_RGB8 = 0x8051
GL_RGBA8 = 0x8058

PathLike = Union[str, os.PathLike]

_KEPT_MODES = {"L", "LA", "RGB", "RGBA"}


def formats_for_channels(channels: int) -> tuple[int, int]:
    """Return the (internal, data) OpenGL formats for 3 or 4 channel images."""
    if channels == 4:
        return GL_RGBA8, GL_RGBA
    if channels == 3:
        return GL_RGB8, GL_RGB
    raise EngineError("Assertion Failed: Format not supported!")


def _normalised(image: Image.Image) -> Image.Image:
    mode = image.mode
    if mode in _KEPT_MODES:
        return image
    if mode == "P":
        return image.convert("RGBA" if "transparency" in image.info else "RGB")
    if mode == "PA":
        return image.convert("RGBA")
    if mode in ("1", "I", "I;16", "I;16B", "I;16L", "F"):
        return image.convert("L")
    return image.convert("RGBA" if "A" in image.getbands() else "RGB")


def load_image(path: PathLike) -> tuple[int, int, int, bytes]:
    """Decode an image file into (width, height, channels, 8-bit pixel rows from the top)."""
    try:
        with Image.open(path) as image:
            image.load()
            decoded = _normalised(image)
            return (
                decoded.width,
                decoded.height,
                len(decoded.getbands()),
                decoded.tobytes(),
            )
    except (OSError, ValueError) as exc:
        raise EngineError("Assertion Failed: Failed to load image!") from exc


def _gl():
    from pyglet import gl

    return gl


class Texture2D:
    """An RGB or RGBA image sampled with nearest filtering, uploaded on first bind."""

    def __init__(self, path: PathLike) -> None:
        self.path = os.fspath(path)
        width, height, channels, pixels = load_image(path)
        self._internal_format, self._data_format = formats_for_channels(channels)
        self._width = width
        self._height = height
        self._pixels: bytes | None = pixels
        self._renderer_id: int | None = None

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _upload(self, gl) -> int:
        handle = gl.GLuint()
        gl.glGenTextures(1, handle)
        gl.glBindTexture(gl.GL_TEXTURE_2D, handle.value)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MIN_FILTER, gl.GL_NEAREST)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MAG_FILTER, gl.GL_NEAREST)
        gl.glPixelStorei(gl.GL_UNPACK_ALIGNMENT, 1)
        gl.glTexImage2D(
            gl.GL_TEXTURE_2D,
            0,
            self._internal_format,
            self._width,
            self._height,
            0,
            self._data_format,
            gl.GL_UNSIGNED_BYTE,
            self._pixels or b"",
        )
        self._pixels = None
        return handle.value

    def bind(self, slot: int = 0) -> None:
        """Bind the texture to texture unit ``slot``."""
        if slot < 0:
            raise ValueError("texture slot must not be negative")
        gl = _gl()
        gl.glActiveTexture(gl.GL_TEXTURE0 + slot)
        if self._renderer_id is None:
            self._renderer_id = self._upload(gl)
        else:
            gl.glBindTexture(gl.GL_TEXTURE_2D, self._renderer_id)

    def close(self) -> None:
        """Delete the GPU texture, if it was created."""
        if self._renderer_id is not None:
            gl = _gl()
            gl.glDeleteTextures(1, gl.GLuint(self._renderer_id))
            self._renderer_id = None

    def __enter__(self) -> Texture2D:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Texture2D({self.path!r}, {self._width}x{self._height})"


def create_texture2d(path: PathLike) -> Texture2D:
    """Create a texture for the selected graphics API."""
    api = get_api()
    vex_assert(api is not API.NONE, "RendererAPI::None is currently not supported!")
    vex_assert(api is API.OPENGL, "Unknown RendererAPI!")
    return Texture2D(path)