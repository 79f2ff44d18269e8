# utils.py
"""
Shared numeric helpers: angle conversion and rounding.

Rotation (transform.py / shapes.py) and arc sampling (raster.py) both go through
this module so that they agree on the value of pi and on degree conversion.
"""
import math

PI = math.pi

# 圆按八分之一周采样，椭圆按四分之一周采样
OCTANT_ANGLE = PI / 4.0
QUADRANT_ANGLE = PI / 2.0


def deg_to_rad(angle_deg):
    """角度 -> 弧度"""
    return angle_deg * PI / 180.0


def sweep_angle(segment_angle, i, steps):
    """第 i 个采样点的角度：把 [0, segment_angle] 均分为 steps 段"""
    return segment_angle * i / steps


def round_half_away(value):
    """四舍五入到最近整数，.5 远离零取整（与 Python 内置的银行家舍入不同）"""
    magnitude = abs(value)
    n = math.floor(magnitude)
    # magnitude - n 是精确的浮点减法
    if magnitude - n >= 0.5:
        n += 1
    return int(n) if value >= 0 else -int(n)


def round_point(x, y):
    return round_half_away(x), round_half_away(y)


def rotate_point(x, y, angle_rad, center_x=0.0, center_y=0.0):
    """旋转点坐标的工具函数"""
    new_x = center_x + (x - center_x) * math.cos(angle_rad) - (y - center_y) * math.sin(angle_rad)
    new_y = center_y + (x - center_x) * math.sin(angle_rad) + (y - center_y) * math.cos(angle_rad)
    return new_x, new_y
