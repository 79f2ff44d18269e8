# drawing_utils.py

"""
Drawing utilities: write rasterized primitives into any pixel sink.

A sink is anything with ``set_pixel(x, y, color)`` (PixelBuffer, ImageDrawSink,
or a display surface). Region fills additionally need read-back and therefore
only accept a PixelBuffer.
"""
import logging

from raster import SimpleRasterization
from polygon import validate_polygon
from pixel_buffer import PixelSink, to_rgba
from region_fill import boundary_fill, flood_fill

_LOG = logging.getLogger(__name__)


def put_pixel(sink: PixelSink, x, y, color):
    return sink.set_pixel(x, y, color)


def _put_points(sink: PixelSink, points, color):
    for px, py in points:
        put_pixel(sink, px, py, color)
    return len(points)


def draw_line_incremental(sink: PixelSink, a, b, color):
    color = to_rgba(color)
    points = SimpleRasterization.incremental_line(a[0], a[1], b[0], b[1])
    n = _put_points(sink, points, color)
    _LOG.debug("line %s-%s: %d pixel writes", a, b, n)
    return n


def draw_line_default(sink: PixelSink, a, b, color):
    """两点直线：sink 自带 draw_line（PIL）时直接用，否则退回增量算法"""
    color = to_rgba(color)
    native = getattr(sink, "draw_line", None)
    if native is None:
        draw_line_incremental(sink, a, b, color)
        return
    native([a[0], a[1], b[0], b[1]], color, width=1)


def draw_circle(sink: PixelSink, center, radius, color, steps=64):
    color = to_rgba(color)
    points = SimpleRasterization.circle_points(center[0], center[1], radius, steps)
    n = _put_points(sink, points, color)
    _LOG.debug("circle r=%s steps=%d: %d pixel writes", radius, steps, n)


def draw_ellipse(sink: PixelSink, center, rx, ry, color, steps=90):
    color = to_rgba(color)
    points = SimpleRasterization.ellipse_points(center[0], center[1], rx, ry, steps)
    n = _put_points(sink, points, color)
    _LOG.debug("ellipse rx=%s ry=%s steps=%d: %d pixel writes", rx, ry, steps, n)


def draw_polygon(sink: PixelSink, points, color):
    """先检测自相交，通过后逐边用增量直线绘制。

    返回 True 表示已绘制；False 表示少于 3 个顶点或存在相交边，此时不写任何像素。
    """
    check = validate_polygon(points)
    if not check.ok:
        _LOG.debug("polygon not drawn: %s", check.reason)
        return False
    color = to_rgba(color)
    n = len(points)
    writes = 0
    for i in range(n):
        writes += draw_line_incremental(sink, points[i], points[(i + 1) % n], color)
    _LOG.debug("polygon with %d vertices: %d pixel writes", n, writes)
    return True


class PrimitiveRenderer:
    """把各个绘制函数和配置中的默认采样数打包在一起，供图形对象作为绘制策略引用"""

    def __init__(self, config=None):
        self.circle_steps = config.circle_steps if config is not None else 64
        self.ellipse_steps = config.ellipse_steps if config is not None else 90

    def draw_line_default(self, sink, a, b, color):
        draw_line_default(sink, a, b, color)

    def draw_line_incremental(self, sink, a, b, color):
        draw_line_incremental(sink, a, b, color)

    def draw_circle(self, sink, center, radius, color, steps=None):
        draw_circle(sink, center, radius, color, self.circle_steps if steps is None else steps)

    def draw_ellipse(self, sink, center, rx, ry, color, steps=None):
        draw_ellipse(sink, center, rx, ry, color, self.ellipse_steps if steps is None else steps)

    def draw_polygon(self, sink, points, color):
        return draw_polygon(sink, points, color)

    def boundary_fill(self, buffer, x, y, fill_color, boundary_color):
        return boundary_fill(buffer, x, y, fill_color, boundary_color)

    def flood_fill(self, buffer, x, y, fill_color):
        return flood_fill(buffer, x, y, fill_color)
