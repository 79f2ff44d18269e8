# demo_scene.py
"""
Demo scene: primitive shapes plus the boundary-fill and flood-fill examples,
composited into a single frame for the viewer.
"""
import logging

from config import RenderConfig
from drawing_utils import PrimitiveRenderer
from pixel_buffer import BLACK, BLUE, MAGENTA, RED, WHITE, PixelBuffer
from shapes import LineSegment, Point2D, Polygon

_LOG = logging.getLogger(__name__)

FILL_DEMO_SIZE = (200, 150)
BOUNDARY_FILL_COLOR = (200, 255, 200, 255)
FLOOD_BACKGROUND = (240, 240, 255, 255)
FLOOD_FILL_COLOR = (255, 220, 200, 255)

# 两个填充示例在整帧中的位置
BOUNDARY_DEMO_POS = (700, 50)
FLOOD_DEMO_POS = (700, 250)

DEMO_POLYGON = [(100, 400), (200, 450), (180, 550), (60, 520)]


def build_boundary_demo(renderer=None):
    """白底 + 黑色矩形边框，在 (50, 50) 做边界填充"""
    renderer = renderer or PrimitiveRenderer()
    w, h = FILL_DEMO_SIZE
    buf = PixelBuffer.new(w, h, WHITE)
    buf.draw_rect_outline(10, 10, 190, 140, BLACK)
    renderer.boundary_fill(buf, 50, 50, BOUNDARY_FILL_COLOR, BLACK)
    return buf


def build_flood_demo(renderer=None):
    """浅蓝底 + 一圈黑色外框，在中心 (100, 75) 做洪水填充"""
    renderer = renderer or PrimitiveRenderer()
    w, h = FILL_DEMO_SIZE
    buf = PixelBuffer.new(w, h, FLOOD_BACKGROUND)
    for x in range(w):
        buf.set_pixel(x, 0, BLACK)
        buf.set_pixel(x, h - 1, BLACK)
    for y in range(h):
        buf.set_pixel(0, y, BLACK)
        buf.set_pixel(w - 1, y, BLACK)
    renderer.flood_fill(buf, 100, 75, FLOOD_FILL_COLOR)
    return buf


def build_primitives(config=None, renderer=None):
    config = config or RenderConfig()
    renderer = renderer or PrimitiveRenderer(config)
    buf = PixelBuffer.new(config.canvas_width, config.canvas_height, config.background)

    LineSegment(Point2D(50, 50), Point2D(300, 100), RED).draw(buf)
    LineSegment(Point2D(50, 100), Point2D(300, 200), BLUE, renderer=renderer).draw(buf)
    renderer.draw_circle(buf, (200, 300), 60, BLACK)
    renderer.draw_ellipse(buf, (400, 300), 80, 40, BLACK)
    if not Polygon(DEMO_POLYGON, MAGENTA).draw(buf, renderer):
        _LOG.warning("demo polygon was rejected")
    return buf


def compose_frame(config=None):
    """返回整帧 PIL 图像：图元画布 + 两个填充示例"""
    config = config or RenderConfig()
    renderer = PrimitiveRenderer(config)
    frame = build_primitives(config, renderer)
    frame.paste(build_boundary_demo(renderer), *BOUNDARY_DEMO_POS)
    frame.paste(build_flood_demo(renderer), *FLOOD_DEMO_POS)
    _LOG.info("demo frame composed: %dx%d", frame.width, frame.height)
    return frame.image
