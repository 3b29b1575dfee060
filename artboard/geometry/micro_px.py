"""MicroPx fixed-point scalar: canonical truth for persisted geometry.

A MicroPx is a plain Python ``int`` holding pixels × 1,000,000. Extents
(width/height) live in ``[MIN_PX_U, MAX_PX_U]``; positions (x/y) live in
``[-MAX_PX_U, MAX_PX_U]``. Out-of-range values are clamped, never rejected.
"""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

MicroPx = int

PX_U_SCALE: MicroPx = 1_000_000  # µpx per px
MAX_PX_U: MicroPx = 32_768_000_000  # 32768 px per edge at µpx scale
MIN_PX_U: MicroPx = PX_U_SCALE  # 1 px

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class ParseError(ValueError):
    """Raised when a µpx string is not a plain base-10 integer."""


def clamp_micro_px(value: MicroPx) -> MicroPx:
    """Clamp an extent into [MIN_PX_U, MAX_PX_U]."""
    if value < MIN_PX_U:
        logger.debug("Clamped µpx extent %d up to %d", value, MIN_PX_U)
        return MIN_PX_U
    if value > MAX_PX_U:
        logger.debug("Clamped µpx extent %d down to %d", value, MAX_PX_U)
        return MAX_PX_U
    return value


def clamp_position_px_u(value: MicroPx) -> MicroPx:
    """Clamp a position offset into [-MAX_PX_U, MAX_PX_U]. Zero stays zero."""
    if value < -MAX_PX_U:
        return -MAX_PX_U
    if value > MAX_PX_U:
        return MAX_PX_U
    return value


def parse_integer_string(text: object) -> MicroPx:
    """Parse a base-10 integer string into µpx. Does not clamp.

    ``int()`` alone is too lenient here (it accepts surrounding whitespace
    and ``_`` separators), so the shape is checked first.
    """
    if not isinstance(text, str):
        raise ParseError(f"expected an integer string, got {type(text).__name__}")
    if not _INTEGER_RE.fullmatch(text):
        raise ParseError(f"invalid integer string: {text!r}")
    return int(text)
