# transform.py

"""
Affine transform operations (translate, rotate, scale) over point lists.
"""
from utils import deg_to_rad, rotate_point


def translate_points(points, dx, dy):
    return [(x + dx, y + dy) for x, y in points]


def rotate_points(points, angle_deg, center=(0.0, 0.0)):
    """绕 center 旋转（角度制，y 轴向下时为顺时针）"""
    angle_rad = deg_to_rad(angle_deg)
    cx, cy = center
    return [rotate_point(x, y, angle_rad, cx, cy) for x, y in points]


def scale_points(points, sx, sy, center=(0.0, 0.0)):
    cx, cy = center
    return [(cx + (x - cx) * sx, cy + (y - cy) * sy) for x, y in points]
