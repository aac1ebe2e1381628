from hit_test import EMPTY, EdgeHit, VertexHit, locate
from style import EditorStyle

STYLE = EditorStyle()


def test_locate_vertex_edge_and_empty(two_vertices):
    graph, a, b = two_vertices
    graph.add_edge(a, b)

    assert locate(graph, (0, 0), STYLE) == VertexHit(a)
    assert locate(graph, (50, 1), STYLE) == EdgeHit(a, 0)
    assert locate(graph, (50, 40), STYLE) is EMPTY


def test_vertex_wins_over_edge(two_vertices):
    graph, a, b = two_vertices
    graph.add_edge(a, b)
    # inside B's disc and on the edge's hit zone
    assert locate(graph, (90, 0), STYLE) == VertexHit(b)


def test_radius_boundary_is_not_a_hit(two_vertices):
    graph, a, _ = two_vertices
    radius = STYLE.vertex_radius
    assert locate(graph, (0, radius), STYLE) is EMPTY
    assert locate(graph, (0, radius - 1e-6), STYLE) == VertexHit(a)


def test_edge_hit_width_comes_from_style(two_vertices):
    graph, a, b = two_vertices
    graph.add_edge(a, b)
    assert locate(graph, (50, 8), STYLE) is EMPTY
    wide = EditorStyle(edge_hit_width=20.0)
    assert locate(graph, (50, 8), wide) == EdgeHit(a, 0)
