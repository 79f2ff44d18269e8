from typing import Optional, Protocol, Tuple

from PIL import Image, ImageDraw

Color = Tuple[int, int, int, int]

TRANSPARENT = (0, 0, 0, 0)
BLACK = (0, 0, 0, 255)
WHITE = (255, 255, 255, 255)
RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)
BLUE = (0, 0, 255, 255)
MAGENTA = (255, 0, 255, 255)


def hex_to_rgba(hex_color):
    if not hex_color or hex_color == "transparent":
        return TRANSPARENT
    hex_color = hex_color.lstrip('#')
    if len(hex_color) == 6:
        r, g, b = tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))
        return (r, g, b, 255)
    elif len(hex_color) == 8:
        r, g, b, a = tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4, 6))
        return (r, g, b, a)
    raise ValueError(f"unsupported hex color: #{hex_color}")


def to_rgba(color) -> Color:
    """把 '#RRGGBB' / (r, g, b) / (r, g, b, a) 统一为 RGBA 四元组"""
    if isinstance(color, str):
        return hex_to_rgba(color)
    channels = tuple(int(c) for c in color)
    if len(channels) == 3:
        channels = channels + (255,)
    if len(channels) != 4 or any(c < 0 or c > 255 for c in channels):
        raise ValueError(f"invalid RGBA color: {color!r}")
    return channels


class PixelSink(Protocol):
    """任何能“写一个像素”的目标：持久画布或临时渲染表面"""

    def set_pixel(self, x: int, y: int, color: Color) -> bool:
        ...


class PixelBuffer:
    """基于 PIL RGBA 图像的持久像素缓冲（可回读，供区域填充使用）。

    用法：
        buf = PixelBuffer.new(200, 150, WHITE)
        buf.set_pixel(10, 10, BLACK)
        buf.get_pixel(10, 10)   # -> (0, 0, 0, 255)

    越界坐标一律静默忽略：set_pixel 返回 False，get_pixel 返回 None。
    """
    def __init__(self, image):
        if image.mode != "RGBA":
            raise ValueError(f"PixelBuffer needs an RGBA image, got {image.mode}")
        self.image = image
        self.draw = ImageDraw.Draw(self.image)
        self._pixels = self.image.load()

    @classmethod
    def new(cls, width, height, color=TRANSPARENT):
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        return cls(Image.new("RGBA", (int(width), int(height)), to_rgba(color)))

    @classmethod
    def from_image(cls, image):
        # 总是拷贝，避免与调用方共享存储
        return cls(image.convert("RGBA") if image.mode != "RGBA" else image.copy())

    @property
    def width(self):
        return self.image.width

    @property
    def height(self):
        return self.image.height

    def in_bounds(self, x, y):
        return 0 <= x < self.image.width and 0 <= y < self.image.height

    def get_pixel(self, x, y) -> Optional[Color]:
        if not self.in_bounds(x, y):
            return None
        return self._pixels[x, y]

    def set_pixel(self, x, y, color) -> bool:
        if not self.in_bounds(x, y):
            return False
        self._pixels[x, y] = color
        return True

    def clear(self, color):
        self.image.paste(to_rgba(color), (0, 0, self.image.width, self.image.height))

    def copy(self):
        return PixelBuffer(self.image.copy())

    def paste(self, src, x=0, y=0):
        """把另一块缓冲按 alpha 合成到 (x, y)，超出部分被裁掉"""
        self.image.paste(src.image, (int(x), int(y)), src.image)

    def draw_line(self, coords, rgba, width=1):
        # 直接使用 PIL 的两点直线，不经过增量算法
        self.draw.line(coords, fill=rgba, width=width)

    def draw_rect_outline(self, x0, y0, x1, y1, rgba):
        """逐像素画边框：上下边取 x in [x0, x1)，左右边取 y in [y0, y1)，右下角 (x1, y1) 不画"""
        for x in range(x0, x1):
            self.set_pixel(x, y0, rgba)
            self.set_pixel(x, y1, rgba)
        for y in range(y0, y1):
            self.set_pixel(x0, y, rgba)
            self.set_pixel(x1, y, rgba)

    def tobytes(self):
        return self.image.tobytes()

    def count(self, color):
        """统计等于 color 的像素个数"""
        color = to_rgba(color)
        colors = self.image.getcolors(self.image.width * self.image.height)
        return next((n for n, c in colors if c == color), 0)


class ImageDrawSink:
    """只写的临时渲染目标：包装 ImageDraw.Draw，不支持回读"""

    def __init__(self, draw, size=None):
        self.draw = draw
        self.width, self.height = size if size is not None else draw.im.size

    @classmethod
    def for_image(cls, image):
        return cls(ImageDraw.Draw(image), image.size)

    def set_pixel(self, x, y, color) -> bool:
        if not (0 <= x < self.width and 0 <= y < self.height):
            return False
        self.draw.point((x, y), fill=color)
        return True

    def draw_line(self, coords, rgba, width=1):
        self.draw.line(coords, fill=rgba, width=width)
