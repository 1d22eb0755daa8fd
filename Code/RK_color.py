# RK_color.py
import colorsys

# Windows Paint scale: hue, saturation and luminance all run 0-240
HSL_MAX = 240
RGB_MAX = 255


def rgb_to_hsl(r, g, b):
    """
    Convert an 8-bit RGB color to (h, s, l) on the 0-240 scale.

    Hue wraps, so it stays in 0-239. Grays (s == 0) report hue 0.
    """
    h, l, s = colorsys.rgb_to_hls(r / RGB_MAX, g / RGB_MAX, b / RGB_MAX)
    return (int(h * HSL_MAX + 0.5) % HSL_MAX,
            int(s * HSL_MAX + 0.5),
            int(l * HSL_MAX + 0.5))


def hsl_to_rgb(h, s, l):
    """Convert (h, s, l) on the 0-240 scale back to 8-bit RGB"""
    r, g, b = colorsys.hls_to_rgb((h % HSL_MAX) / HSL_MAX, l / HSL_MAX, s / HSL_MAX)
    return (int(r * RGB_MAX + 0.5),
            int(g * RGB_MAX + 0.5),
            int(b * RGB_MAX + 0.5))
