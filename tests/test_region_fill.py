from __future__ import annotations

from pixel_buffer import BLACK, BLUE, GREEN, RED, WHITE
from region_fill import boundary_fill, flood_fill


def _outline(canvas, x0: int, y0: int, x1: int, y1: int, color=BLACK) -> None:
    for x in range(x0, x1 + 1):
        canvas.set_pixel(x, y0, color)
        canvas.set_pixel(x, y1, color)
    for y in range(y0, y1 + 1):
        canvas.set_pixel(x0, y, color)
        canvas.set_pixel(x1, y, color)


def test_flood_fill_uniform_canvas_fills_everything(make_canvas) -> None:
    canvas = make_canvas(16, 12)
    filled = flood_fill(canvas, 5, 5, RED)
    assert len(filled) == 16 * 12
    assert canvas.count(RED) == 16 * 12


def test_boundary_fill_stays_inside_rectangle(make_canvas) -> None:
    canvas = make_canvas(30, 30)
    _outline(canvas, 5, 5, 20, 15)
    before = canvas.copy()

    filled = boundary_fill(canvas, 12, 10, GREEN, BLACK)

    assert len(filled) == 14 * 9
    for y in range(canvas.height):
        for x in range(canvas.width):
            if 5 < x < 20 and 5 < y < 15:
                assert canvas.get_pixel(x, y) == GREEN
            else:
                assert canvas.get_pixel(x, y) == before.get_pixel(x, y)


def test_boundary_fill_overwrites_non_boundary_colors(make_canvas) -> None:
    canvas = make_canvas(12, 12)
    _outline(canvas, 0, 0, 11, 11)
    canvas.set_pixel(4, 4, BLUE)
    boundary_fill(canvas, 6, 6, GREEN, BLACK)
    assert canvas.get_pixel(4, 4) == GREEN


def test_flood_fill_only_replaces_captured_background(make_canvas) -> None:
    canvas = make_canvas(12, 12)
    for y in range(12):
        canvas.set_pixel(6, y, BLACK)
    canvas.set_pixel(2, 2, BLUE)

    flood_fill(canvas, 1, 1, RED)

    assert canvas.get_pixel(2, 2) == BLUE
    assert canvas.get_pixel(6, 3) == BLACK
    assert canvas.get_pixel(9, 9) == WHITE
    assert canvas.count(RED) == 6 * 12 - 1


def test_flood_fill_is_idempotent(make_canvas) -> None:
    once = make_canvas(10, 10)
    _outline(once, 2, 2, 7, 7)
    twice = once.copy()

    flood_fill(once, 4, 4, RED)
    flood_fill(twice, 4, 4, RED)
    second = flood_fill(twice, 4, 4, RED)

    assert second == []
    assert once.tobytes() == twice.tobytes()


def test_seed_on_stop_or_fill_color_is_noop(make_canvas) -> None:
    canvas = make_canvas(10, 10)
    _outline(canvas, 2, 2, 7, 7)
    canvas.set_pixel(4, 4, GREEN)
    snapshot = canvas.tobytes()

    assert boundary_fill(canvas, 2, 2, GREEN, BLACK) == []
    assert boundary_fill(canvas, 4, 4, GREEN, BLACK) == []
    assert flood_fill(canvas, 2, 2, BLACK) == []
    assert canvas.tobytes() == snapshot


def test_out_of_bounds_seed_is_noop(make_canvas) -> None:
    canvas = make_canvas(8, 8)
    snapshot = canvas.tobytes()
    assert flood_fill(canvas, -1, 0, RED) == []
    assert flood_fill(canvas, 8, 3, RED) == []
    assert boundary_fill(canvas, 3, 99, RED, BLACK) == []
    assert canvas.tobytes() == snapshot


def test_large_region_fills_without_recursion(make_canvas) -> None:
    canvas = make_canvas(300, 300)
    assert len(flood_fill(canvas, 150, 150, RED)) == 300 * 300
