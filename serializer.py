"""
Text declaration of a graph:

    Hello world!;
    Holy smokes!;

    Holy smokes! => Hello world!;

Labels are written as they are; two vertices with the same label produce
ambiguous output and that is accepted.
"""

from enum import Enum
from typing import List

from graph_store import Graph, Vertex


class Order(Enum):
    INSERTION = "insertion"
    LABEL = "label"


def ordered_vertices(graph: Graph, order: Order = Order.INSERTION) -> List[Vertex]:
    vertices = list(graph)
    if order == Order.LABEL:
        vertices.sort(key=lambda v: v.label)
    return vertices


def serialize(graph: Graph, order: Order = Order.INSERTION) -> str:
    """Render the graph as vertex declarations, a blank line, then one line per edge"""
    vertices = ordered_vertices(graph, order)

    declarations = "".join(f"{v.label};\n" for v in vertices)
    connections = []
    for vertex in vertices:
        for target in vertex.outs:
            connections.append(f"{vertex.label} => {graph.get(target).label};")

    return declarations + "\n" + "\n".join(connections)
