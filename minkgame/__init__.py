"""A small 2D game framework on pygame: vectors, colours, cameras, input, audio, sprites and a frame loop."""

__version__ = "0.1.0"

__all__ = [
    "assets",
    "audiomath",
    "camera",
    "colors",
    "draw",
    "input",
    "matrices",
    "runtime",
    "sounds",
    "timing",
    "vectors",
    "video",
    "windowing",
]