"""Colour palette used when drawing interactions.

Colours share a constant lightness and saturation per shade in HSL space:

* Dark: lightness 20, saturation 70
* Standard: lightness 30, saturation 70
* Light: lightness 50, saturation 70
* Bright: lightness 65, saturation 90

Hues: red 0, orange 30, yellow 60, green 120, cyan 180, blue 240,
purple 280, pink 310.

Every colour is an ``(r, g, b)`` tuple of 8-bit channels.
"""

from typing import Tuple

RGB = Tuple[int, int, int]

WHITE: RGB = (255, 255, 255)
BLACK: RGB = (0, 0, 0)

DARK_RED: RGB = (86, 15, 15)
STANDARD_RED: RGB = (130, 22, 22)
LIGHT_RED: RGB = (216, 38, 38)
BRIGHT_RED: RGB = (246, 85, 85)
DARK_ORANGE: RGB = (86, 51, 15)
STANDARD_ORANGE: RGB = (130, 76, 22)
LIGHT_ORANGE: RGB = (216, 127, 38)
BRIGHT_ORANGE: RGB = (246, 165, 85)
DARK_YELLOW: RGB = (86, 86, 15)
STANDARD_YELLOW: RGB = (130, 130, 22)
LIGHT_YELLOW: RGB = (216, 216, 38)
BRIGHT_YELLOW: RGB = (246, 246, 85)
DARK_GREEN: RGB = (15, 86, 15)
STANDARD_GREEN: RGB = (22, 130, 22)
LIGHT_GREEN: RGB = (38, 216, 38)
BRIGHT_GREEN: RGB = (85, 246, 85)
DARK_CYAN: RGB = (15, 86, 86)
STANDARD_CYAN: RGB = (22, 130, 130)
LIGHT_CYAN: RGB = (38, 216, 216)
BRIGHT_CYAN: RGB = (85, 246, 246)
DARK_BLUE: RGB = (15, 15, 86)
STANDARD_BLUE: RGB = (22, 22, 130)
LIGHT_BLUE: RGB = (38, 38, 216)
BRIGHT_BLUE: RGB = (85, 85, 246)
DARK_PURPLE: RGB = (62, 15, 86)
STANDARD_PURPLE: RGB = (94, 22, 130)
LIGHT_PURPLE: RGB = (157, 38, 216)
BRIGHT_PURPLE: RGB = (192, 85, 246)
DARK_PINK: RGB = (86, 15, 74)
STANDARD_PINK: RGB = (130, 22, 112)
LIGHT_PINK: RGB = (216, 38, 186)
BRIGHT_PINK: RGB = (246, 85, 219)

DARK_GRAY: RGB = (51, 51, 51)
STANDARD_GRAY: RGB = (76, 76, 76)
LIGHT_GRAY: RGB = (127, 127, 127)
BRIGHT_GRAY: RGB = (165, 165, 165)

LIFELINE_COLOR: RGB = STANDARD_BLUE
GATE_COLOR: RGB = STANDARD_PURPLE
MESSAGE_COLOR: RGB = DARK_GREEN
MESSAGE_KIND_COLOR: RGB = STANDARD_GREEN
GRAMMAR_SYMBOL_COLOR: RGB = BLACK