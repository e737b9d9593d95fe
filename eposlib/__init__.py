"""Runtime helpers: ASCII character classes, byte order, fixed point, math, integer parsing, quicksort, an in-memory framebuffer and a bubble-sort animation."""

__version__ = "0.1.0"