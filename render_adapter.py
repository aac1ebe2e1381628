"""
Turns the graph and the current mode into logical drawing primitives.
Nothing here knows about Qt; the widget paints whatever comes out.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from geometry import Point, distance, perpendicular, unit_vector
from graph_store import Graph, VertexRef
from interaction import CreatingEdge, Mode
from style import Color, EditorStyle


@dataclass(frozen=True)
class Line:
    start: Point
    end: Point
    color: Color
    thickness: float


@dataclass(frozen=True)
class Triangle:
    points: Tuple[Point, Point, Point]
    color: Color


@dataclass(frozen=True)
class Disc:
    center: Point
    radius: float
    fill: Color
    outline: Color
    outline_thickness: float


@dataclass(frozen=True)
class Label:
    vertex: VertexRef
    text: str
    center: Point


Primitive = Union[Line, Triangle, Disc, Label]


@dataclass
class Scene:
    # in paint order, later primitives are drawn on top
    primitives: List[Primitive] = field(default_factory=list)

    def of_type(self, kind):
        return [p for p in self.primitives if isinstance(p, kind)]


def arrow(start: Point, end: Point, style: EditorStyle,
          subtract: float = 0.0) -> Optional[Tuple[Line, Triangle]]:
    """
    Line plus arrowhead from start towards end, stopping `subtract` short of end.

         _      _
        /0\\     |
       /   \\    | h
      /1   2\\   |
      -------   -
         b

    The line runs up to the middle of the base; the tip sits arrow_height
    further along. Returns None when the points are too close for the
    arrowhead to fit in front of start.
    """
    d = unit_vector(start, end)
    if d is None:
        return None

    h = style.arrow_height
    b = style.arrow_base
    length = distance(start, end) - subtract - h
    if length <= 0.0:
        return None
    base = (start[0] + d[0] * length, start[1] + d[1] * length)
    side = perpendicular(d)

    triangle = (
        (base[0] + d[0] * h, base[1] + d[1] * h),
        (base[0] + side[0] * b / 2.0, base[1] + side[1] * b / 2.0),
        (base[0] - side[0] * b / 2.0, base[1] - side[1] * b / 2.0),
    )
    return (Line(start, base, style.edge_color, style.edge_thickness),
            Triangle(triangle, style.edge_color))


def build_scene(graph: Graph, mode: Mode, style: EditorStyle) -> Scene:
    scene = Scene()
    radius = style.vertex_radius

    # edge preview
    if isinstance(mode, CreatingEdge):
        source = graph.get(mode.source)
        if source is not None:
            shape = arrow(source.position, mode.preview, style)
            if shape is not None:
                scene.primitives.extend(shape)

    for vertex in graph:
        # outgoing edges
        for target in vertex.outs:
            dst = graph.get(target)
            if dst is None:
                continue
            shape = arrow(vertex.position, dst.position, style, subtract=radius)
            if shape is not None:
                scene.primitives.extend(shape)

        scene.primitives.append(Disc(vertex.position, radius, style.vertex_fill_color,
                                     style.vertex_outline_color, style.outline_thickness))

    # labels on top of everything
    for vertex in graph:
        scene.primitives.append(Label(vertex.ref, vertex.label, vertex.position))

    return scene
