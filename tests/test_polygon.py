from __future__ import annotations

from drawing_utils import draw_polygon
from pixel_buffer import BLACK, WHITE
from polygon import (
    SELF_INTERSECTING,
    TOO_FEW_VERTICES,
    non_adjacent_edge_pairs,
    segments_intersect,
    validate_polygon,
)

SQUARE = [(0, 0), (10, 0), (10, 10), (0, 10)]
BOWTIE = [(0, 0), (10, 10), (10, 0), (0, 10)]


def test_edge_pairs_skip_adjacent_and_wrapped_edges() -> None:
    assert list(non_adjacent_edge_pairs(3)) == []
    assert list(non_adjacent_edge_pairs(4)) == [(0, 2), (1, 3)]
    assert list(non_adjacent_edge_pairs(5)) == [(0, 2), (0, 3), (1, 3), (1, 4), (2, 4)]


def test_proper_crossing_detected() -> None:
    assert segments_intersect((0, 0), (10, 10), (10, 0), (0, 10))
    assert not segments_intersect((0, 0), (10, 0), (0, 5), (10, 5))


def test_touching_and_collinear_edges_are_not_crossings() -> None:
    # 端点恰好落在另一条边上
    assert not segments_intersect((0, 0), (10, 0), (5, 0), (5, 8))
    # 共线重叠
    assert not segments_intersect((0, 0), (10, 0), (5, 0), (15, 0))


def test_validate_reports_reason() -> None:
    assert validate_polygon(SQUARE).ok
    assert validate_polygon([(0, 0), (1, 1)]).reason == TOO_FEW_VERTICES
    check = validate_polygon(BOWTIE)
    assert not check.ok
    assert check.reason == SELF_INTERSECTING
    assert check.edges == (0, 2)


def test_vertex_touching_non_adjacent_edge_is_accepted(sink) -> None:
    # 边 (10,10)-(5,0) 的端点落在边 (0,0)-(10,0) 上，按严格异号规则不算相交
    assert draw_polygon(sink, [(0, 0), (10, 0), (10, 10), (5, 0)], BLACK)
    assert sink.writes


def test_square_draws_exactly_its_edges(make_canvas) -> None:
    canvas = make_canvas(20, 20)
    assert draw_polygon(canvas, SQUARE, BLACK) is True
    black = [
        (x, y)
        for y in range(canvas.height)
        for x in range(canvas.width)
        if canvas.get_pixel(x, y) == BLACK
    ]
    assert len(black) == 40
    for x, y in black:
        on_vertical = x in (0, 10) and 0 <= y <= 10
        on_horizontal = y in (0, 10) and 0 <= x <= 10
        assert on_vertical or on_horizontal
    assert canvas.get_pixel(5, 5) == WHITE


def test_bowtie_is_refused_without_writes(sink) -> None:
    assert draw_polygon(sink, BOWTIE, BLACK) is False
    assert sink.writes == []


def test_too_few_vertices_is_refused(sink) -> None:
    assert draw_polygon(sink, [(0, 0), (5, 5)], BLACK) is False
    assert draw_polygon(sink, [], BLACK) is False
    assert sink.writes == []
