import math

from utils import OCTANT_ANGLE, QUADRANT_ANGLE, round_half_away, sweep_angle


class SimpleRasterization:
    """光栅化算法实现：只计算像素坐标，不负责写入"""

    @staticmethod
    def incremental_line(x0: float, y0: float, x1: float, y1: float) -> list:
        """增量直线算法 - 浮点版 Bresenham

        沿主轴每次走一个像素，副轴坐标累加斜率后四舍五入（.5 远离零）。
        陡峭线段先交换 x/y，再保证沿主轴递增方向迭代。
        """
        dx = x1 - x0
        dy = y1 - y0

        if dx == 0 and dy == 0:
            return [(round_half_away(x0), round_half_away(y0))]

        steep = abs(dy) > abs(dx)
        if steep:
            x0, y0 = y0, x0
            x1, y1 = y1, x1
            dx, dy = dy, dx

        if x0 > x1:
            x0, x1 = x1, x0
            y0, y1 = y1, y0
            dx = x1 - x0
            dy = y1 - y0

        m = 0.0 if dx == 0 else dy / dx
        y = y0

        points = []
        for x in range(round_half_away(x0), round_half_away(x1) + 1):
            if steep:
                points.append((round_half_away(y), x))
            else:
                points.append((x, round_half_away(y)))
            y += m
        return points

    @staticmethod
    def circle_points(xc: float, yc: float, r: float, steps: int = 64) -> list:
        """三角采样画圆 - 只采样 [0, π/4] 的 steps+1 个点，8 对称复制

        返回 8*(steps+1) 个点，八分圆交界处会有重复点（写像素是幂等的）。
        """
        if steps < 1:
            raise ValueError(f"steps must be >= 1, got {steps}")
        points = []
        for i in range(steps + 1):
            alpha = sweep_angle(OCTANT_ANGLE, i, steps)
            x = r * math.cos(alpha)
            y = r * math.sin(alpha)
            for px, py in (
                (xc + x, yc + y), (xc + y, yc + x),
                (xc - x, yc + y), (xc - y, yc + x),
                (xc - x, yc - y), (xc - y, yc - x),
                (xc + x, yc - y), (xc + y, yc - x),
            ):
                points.append((round_half_away(px), round_half_away(py)))
        return points

    @staticmethod
    def ellipse_points(xc: float, yc: float, rx: float, ry: float, steps: int = 90) -> list:
        """三角采样画椭圆 - 采样 [0, π/2] 的 steps+1 个点，4 对称复制

        两个半径一般不同，所以不能像圆那样交换 x/y。返回 4*(steps+1) 个点。
        """
        if steps < 1:
            raise ValueError(f"steps must be >= 1, got {steps}")
        points = []
        for i in range(steps + 1):
            alpha = sweep_angle(QUADRANT_ANGLE, i, steps)
            x = rx * math.cos(alpha)
            y = ry * math.sin(alpha)
            for px, py in (
                (xc + x, yc + y), (xc - x, yc + y),
                (xc + x, yc - y), (xc - x, yc - y),
            ):
                points.append((round_half_away(px), round_half_away(py)))
        return points
