"""A small layered 2D rendering engine with events, layers, an orthographic camera, buffers and textures."""

__version__ = "0.1.0"