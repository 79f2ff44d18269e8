# shapes.py
"""
Geometry value types: Point2D, LineSegment, Polygon.

Each type carries its own coordinates and color and supports translate / rotate
/ scale about the origin. Drawing goes through any pixel sink; a LineSegment can
hold a PrimitiveRenderer as its line-drawing strategy.
"""
from drawing_utils import draw_line_default, draw_polygon, put_pixel
from pixel_buffer import WHITE, to_rgba
from transform import rotate_points, scale_points, translate_points
from utils import round_point


class Point2D:
    def __init__(self, x=0.0, y=0.0, color=WHITE):
        self.x = float(x)
        self.y = float(y)
        self.color = to_rgba(color)

    def __repr__(self):
        return f"Point2D({self.x!r}, {self.y!r}, color={self.color!r})"

    def __eq__(self, other):
        if not isinstance(other, Point2D):
            return NotImplemented
        return (self.x, self.y, self.color) == (other.x, other.y, other.color)

    @property
    def position(self):
        return (self.x, self.y)

    def copy(self):
        return Point2D(self.x, self.y, self.color)

    def _apply(self, points):
        (self.x, self.y), = points

    def translate(self, dx, dy):
        self._apply(translate_points([self.position], dx, dy))

    def rotate(self, angle_deg):
        self._apply(rotate_points([self.position], angle_deg))

    def scale(self, sx, sy):
        self._apply(scale_points([self.position], sx, sy))

    def draw(self, sink):
        x, y = round_point(self.x, self.y)
        put_pixel(sink, x, y, self.color)


class LineSegment:
    def __init__(self, a, b, color=WHITE, renderer=None):
        # 端点按值保存，变换线段不影响调用方的点
        self.a = a.copy()
        self.b = b.copy()
        self.color = to_rgba(color)
        self.renderer = renderer

    def set_renderer(self, renderer):
        self.renderer = renderer

    def translate(self, dx, dy):
        self.a.translate(dx, dy)
        self.b.translate(dx, dy)

    def rotate(self, angle_deg):
        self.a.rotate(angle_deg)
        self.b.rotate(angle_deg)

    def scale(self, sx, sy):
        self.a.scale(sx, sy)
        self.b.scale(sx, sy)

    def draw(self, sink):
        if self.renderer is not None:
            self.renderer.draw_line_incremental(sink, self.a.position, self.b.position, self.color)
        else:
            draw_line_default(sink, self.a.position, self.b.position, self.color)


class Polygon:
    """按顺序排列的顶点，最后一个顶点隐式连回第一个"""

    def __init__(self, vertices, color=WHITE):
        self.vertices = [(float(x), float(y)) for x, y in vertices]
        self.color = to_rgba(color)

    def translate(self, dx, dy):
        self.vertices = translate_points(self.vertices, dx, dy)

    def rotate(self, angle_deg):
        self.vertices = rotate_points(self.vertices, angle_deg)

    def scale(self, sx, sy):
        self.vertices = scale_points(self.vertices, sx, sy)

    def draw(self, sink, renderer=None):
        if renderer is not None:
            return renderer.draw_polygon(sink, self.vertices, self.color)
        return draw_polygon(sink, self.vertices, self.color)
