# region_fill.py
"""
Region fill algorithms (boundary fill / flood fill) over a PixelBuffer.

Both are breadth-first with an explicit FIFO queue, never recursive. A filled
pixel takes the fill color and is never processed again.
"""
import logging
from collections import deque

from pixel_buffer import to_rgba

_LOG = logging.getLogger(__name__)


def _neighbors(x, y):
    return ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1))


def boundary_fill(buffer, x: int, y: int, fill_color, boundary_color) -> list:
    """边界填充 - 从种子点出发，遇到边界色或已是填充色的像素即停止

    buffer: PixelBuffer
    x, y: 种子点坐标（越界时直接返回）
    返回：按写入顺序排列的被填充像素 [(x1,y1), (x2,y2), ...]
    """
    fill_color = to_rgba(fill_color)
    boundary_color = to_rgba(boundary_color)

    def is_stop(c):
        return c == boundary_color or c == fill_color

    start = buffer.get_pixel(x, y)
    if start is None or is_stop(start):
        return []

    filled = []
    queue = deque([(x, y)])
    while queue:
        px, py = queue.popleft()
        c = buffer.get_pixel(px, py)
        if c is None or is_stop(c):
            continue
        buffer.set_pixel(px, py, fill_color)
        filled.append((px, py))
        queue.extend(_neighbors(px, py))

    _LOG.debug("boundary fill from (%d, %d): %d pixels", x, y, len(filled))
    return filled


def flood_fill(buffer, x: int, y: int, fill_color) -> list:
    """洪水填充 - 把与种子点连通、且颜色等于种子原色的像素替换为填充色

    种子原色只在开始时读取一次；若它已等于填充色则什么都不做。
    返回：按写入顺序排列的被填充像素
    """
    fill_color = to_rgba(fill_color)

    background = buffer.get_pixel(x, y)
    if background is None or background == fill_color:
        return []

    filled = []
    queue = deque([(x, y)])
    while queue:
        px, py = queue.popleft()
        c = buffer.get_pixel(px, py)
        if c is None or c != background:
            continue
        buffer.set_pixel(px, py, fill_color)
        filled.append((px, py))
        queue.extend(_neighbors(px, py))

    _LOG.debug("flood fill from (%d, %d): %d pixels", x, y, len(filled))
    return filled
