import pytest

from interaction import IDLE, CreatingEdge
from render_adapter import Disc, Label, Line, Triangle, arrow, build_scene
from style import EditorStyle

STYLE = EditorStyle()


def test_arrow_geometry_for_committed_edge():
    line, triangle = arrow((0, 0), (100, 0), STYLE, subtract=STYLE.vertex_radius)
    # line stops at radius + arrow height before the target centre
    assert line.start == (0, 0)
    assert line.end == pytest.approx((65.0, 0.0))
    tip, left, right = triangle.points
    assert tip == pytest.approx((75.0, 0.0))
    assert left == pytest.approx((65.0, 7.5))
    assert right == pytest.approx((65.0, -7.5))
    assert line.thickness == STYLE.edge_thickness
    assert triangle.color == STYLE.edge_color


def test_arrow_for_preview_ends_at_pointer():
    line, triangle = arrow((0, 0), (0, 50), STYLE)
    assert line.end == pytest.approx((0.0, 40.0))
    assert triangle.points[0] == pytest.approx((0.0, 50.0))


def test_zero_length_arrow_has_no_shape():
    assert arrow((10, 10), (10, 10), STYLE) is None


def test_arrow_between_overlapping_vertices_is_not_drawn():
    # closer than radius + arrow height, the line would point backwards
    assert arrow((0, 0), (30, 0), STYLE, subtract=STYLE.vertex_radius) is None
    assert arrow((0, 0), (35, 0), STYLE, subtract=STYLE.vertex_radius) is None
    line, _ = arrow((0, 0), (36, 0), STYLE, subtract=STYLE.vertex_radius)
    assert line.end == pytest.approx((1.0, 0.0))


def test_short_preview_is_not_drawn(two_vertices):
    graph, a, _ = two_vertices
    assert arrow((0, 0), (0, 5), STYLE) is None
    scene = build_scene(graph, CreatingEdge(a, (0, 5)), STYLE)
    assert scene.of_type(Line) == []
    assert scene.of_type(Triangle) == []


def test_scene_contains_discs_edges_and_labels(two_vertices):
    graph, a, b = two_vertices
    graph.add_edge(a, b)
    scene = build_scene(graph, IDLE, STYLE)

    discs = scene.of_type(Disc)
    assert [d.center for d in discs] == [(0.0, 0.0), (100.0, 0.0)]
    assert all(d.radius == STYLE.vertex_radius for d in discs)
    assert len(scene.of_type(Line)) == 1
    assert len(scene.of_type(Triangle)) == 1
    assert [(l.vertex, l.text) for l in scene.of_type(Label)] == [(a, "A"), (b, "B")]
    # labels are painted last
    assert isinstance(scene.primitives[-1], Label)


def test_scene_includes_preview_first(two_vertices):
    graph, a, _ = two_vertices
    scene = build_scene(graph, CreatingEdge(a, (0, 80)), STYLE)
    assert isinstance(scene.primitives[0], Line)
    assert scene.primitives[0].start == (0.0, 0.0)
    assert isinstance(scene.primitives[1], Triangle)
    assert scene.primitives[1].points[0] == pytest.approx((0.0, 80.0))


def test_preview_for_missing_source_is_skipped(two_vertices):
    graph, a, _ = two_vertices
    graph.remove_vertex(a)
    scene = build_scene(graph, CreatingEdge(a, (0, 80)), STYLE)
    assert scene.of_type(Line) == []


def test_edge_between_coincident_vertices_is_not_drawn(two_vertices):
    graph, a, b = two_vertices
    graph.add_edge(a, b)
    graph.move_vertex(b, (0, 0))
    scene = build_scene(graph, IDLE, STYLE)
    assert scene.of_type(Line) == []
    assert len(scene.of_type(Disc)) == 2
