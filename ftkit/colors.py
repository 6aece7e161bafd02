"""Packing 24-bit RGB colours into the pixel layout of a display visual."""

from __future__ import annotations

from typing import Sequence, Tuple

TRUE_COLOR_DEPTH = 24

Shifts = Tuple[int, int, int, int, int, int]


def _mask_shift_and_width(mask: int) -> Tuple[int, int]:
    if mask <= 0:
        raise ValueError(f"channel mask must be positive, got {mask}")
    shift = (mask & -mask).bit_length() - 1
    mask >>= shift
    width = 0
    while mask & 1:
        mask >>= 1
        width += 1
    return shift, width


def channel_shifts(red_mask: int, green_mask: int, blue_mask: int) -> Shifts:
    """Describe the three channel masks of a visual.

    Returns ``(red_shift, red_bits, green_shift, green_bits, blue_shift,
    blue_bits)``: for each mask, the position of its lowest set bit and the
    number of consecutive set bits from there.
    """
    red = _mask_shift_and_width(red_mask)
    green = _mask_shift_and_width(green_mask)
    blue = _mask_shift_and_width(blue_mask)
    return red + green + blue


def get_color_value(color: int, depth: int, shifts: Sequence[int]) -> int:
    """Convert a 0xRRGGBB colour into a pixel value for a visual.

    At a depth of 24 bits or more the colour is returned unchanged;
    otherwise each channel is reduced to its width in ``shifts`` (as given
    by :func:`channel_shifts`) and moved to its position.
    """
    if depth >= TRUE_COLOR_DEPTH:
        return color
    if len(shifts) != 6:
        raise ValueError(f"expected six shift values, got {len(shifts)}")
    red_shift, red_bits, green_shift, green_bits, blue_shift, blue_bits = shifts
    for bits in (red_bits, green_bits, blue_bits):
        if not 0 <= bits <= 16:
            raise ValueError(f"channel width must lie between 0 and 16, got {bits}")
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - red_bits)) << red_shift)
        + ((green >> (16 - green_bits)) << green_shift)
        + ((blue >> (16 - blue_bits)) << blue_shift)
    )