"""Unit bake-in: user-facing units (mm/cm/pt/px at a DPI) ↔ canonical µpx.

``unit_to_px_u`` is the only place a typed value is rounded into µpx.
Everything downstream (serialization, persistence) only clamps.
Display formatting: up to 4 dp, trailing zeros trimmed.
"""

from __future__ import annotations

import math
import re
from typing import Literal, get_args

from artboard.geometry.micro_px import PX_U_SCALE, MicroPx, ParseError

Unit = Literal["mm", "cm", "pt", "px"]
UNITS: tuple[str, ...] = get_args(Unit)

UM_PER_INCH = 25_400  # µm per inch
PT_PER_INCH = 72
DISPLAY_MAX_DP = 4

_DECIMAL_RE = re.compile(r"[0-9]+(\.[0-9]*)?")
_TRAILING_ZEROS_RE = re.compile(r"(\.\d*?)0+$")


def _check_dpi(dpi: int | float) -> int:
    if isinstance(dpi, bool) or not math.isfinite(dpi) or int(dpi) != dpi:
        raise ValueError(f"dpi must be an integer, got {dpi!r}")
    if dpi <= 0:
        raise ValueError("dpi must be > 0")
    return int(dpi)


def div_round_half_up(n: int, d: int) -> int:
    """Integer division rounding half away from zero."""
    if d == 0:
        raise ZeroDivisionError("division by zero")
    negative = (n < 0) != (d < 0)
    q, r = divmod(abs(n), abs(d))
    if r * 2 >= abs(d):
        q += 1
    return -q if negative else q


def parse_decimal_to_scaled_int(text: str, scale: int) -> int:
    """Parse a decimal string into a scaled integer: "12.34" with scale=3 → 12340.

    Fraction digits beyond ``scale`` are truncated; the rounding policy
    belongs to the caller.
    """
    s = text.strip().replace(",", ".", 1)
    if not _DECIMAL_RE.fullmatch(s):
        raise ParseError(f"invalid number: {text!r}")
    int_part, _, frac = s.partition(".")
    frac = (frac + "0" * scale)[:scale]
    return int(int_part) * 10**scale + int(frac or "0")


def format_scaled_int(value: int, src_scale: int, max_dp: int) -> str:
    """Format a scaled integer with up to ``max_dp`` decimals, trimming zeros."""
    x = value
    diff = src_scale - max_dp
    if diff > 0:
        x = div_round_half_up(x, 10**diff)
    elif diff < 0:
        x = x * 10 ** (-diff)

    sign = "-" if x < 0 else ""
    digits = str(abs(x)).rjust(max_dp + 1, "0")
    if max_dp == 0:
        return sign + digits
    i = len(digits) - max_dp
    out = f"{digits[:i]}.{digits[i:]}"
    out = _TRAILING_ZEROS_RE.sub(r"\1", out).rstrip(".")
    return sign + out


def unit_to_px_u(text: str, unit: Unit, dpi: int) -> MicroPx:
    """Bake a typed value into µpx. The single rounding point of the pipeline."""
    dpi_int = _check_dpi(dpi)

    if unit == "px":
        return parse_decimal_to_scaled_int(text, 6)
    if unit == "mm":
        um = parse_decimal_to_scaled_int(text, 3)  # mm * 1000 = µm
        return div_round_half_up(um * dpi_int * PX_U_SCALE, UM_PER_INCH)
    if unit == "cm":
        um = parse_decimal_to_scaled_int(text, 4)  # cm * 10000 = µm
        return div_round_half_up(um * dpi_int * PX_U_SCALE, UM_PER_INCH)
    if unit == "pt":
        pt_u = parse_decimal_to_scaled_int(text, 6)
        return div_round_half_up(pt_u * dpi_int * PX_U_SCALE, PT_PER_INCH * 1_000_000)
    raise ValueError(f"unsupported unit: {unit}")


def px_u_to_unit_display(px_u: MicroPx, unit: Unit, dpi: int) -> str:
    dpi_int = _check_dpi(dpi)

    if unit == "px":
        return format_scaled_int(px_u, 6, DISPLAY_MAX_DP)
    if unit == "mm":
        um = div_round_half_up(px_u * UM_PER_INCH, dpi_int * PX_U_SCALE)
        return format_scaled_int(um, 3, DISPLAY_MAX_DP)
    if unit == "cm":
        um = div_round_half_up(px_u * UM_PER_INCH, dpi_int * PX_U_SCALE)
        return format_scaled_int(um, 4, DISPLAY_MAX_DP)
    if unit == "pt":
        pt_u = div_round_half_up(px_u * PT_PER_INCH * 1_000_000, dpi_int * PX_U_SCALE)
        return format_scaled_int(pt_u, 6, DISPLAY_MAX_DP)
    raise ValueError(f"unsupported unit: {unit}")


def px_u_to_px(px_u: MicroPx) -> float:
    """µpx → float px, for the on-screen transform only. Never persisted."""
    return px_u / PX_U_SCALE


def typed_value_to_px_u(text: str, unit: Unit, dpi: int) -> MicroPx:
    """Like ``unit_to_px_u`` but a blank field reads as zero."""
    return unit_to_px_u(text.strip() or "0", unit, dpi)


def convert_unit(text: str, from_unit: Unit, to_unit: Unit, dpi: int) -> str:
    """Convert between units via µpx so 10 cm → 100 mm exactly, not 99.99 mm."""
    px_u = typed_value_to_px_u(text, from_unit, dpi)
    return px_u_to_unit_display(px_u, to_unit, dpi)
