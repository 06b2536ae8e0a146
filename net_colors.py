import colorsys
import zlib
from typing import Hashable, Tuple

RGB = Tuple[int, int, int]
RGBA = Tuple[int, int, int, int]

# --- Параметры палитры ---
GOLDEN_RATIO_CONJUGATE = 0.618033988749895
HUE_OFFSET = 0.2
SATURATION = 0.65
LIGHTNESS = 0.55
DEFAULT_ALPHA = 0.7


def _region_index(region: Hashable) -> int:
    if isinstance(region, bool):
        return int(region)
    if isinstance(region, int):
        return region
    # crc32 не зависит от PYTHONHASHSEED, цвет стабилен между запусками
    return zlib.crc32(str(region).encode("utf-8"))


def color_for_id(region: Hashable) -> RGB:
    """
    Детерминированный цвет для региона: один регион -> один цвет.
    Оттенок сдвигается на золотое сечение, поэтому соседние регионы
    оказываются далеко друг от друга на цветовом круге.
    """
    hue = (HUE_OFFSET + _region_index(region) * GOLDEN_RATIO_CONJUGATE) % 1.0
    r, g, b = colorsys.hls_to_rgb(hue, LIGHTNESS, SATURATION)
    return int(r * 255), int(g * 255), int(b * 255)


def rgba_for_region(region: Hashable, alpha: float = DEFAULT_ALPHA) -> RGBA:
    """Цвет региона с прозрачностью в формате pygame (альфа 0..255)."""
    alpha = max(0.0, min(1.0, alpha))
    return color_for_id(region) + (int(alpha * 255),)
