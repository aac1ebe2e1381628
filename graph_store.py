"""
Directed graph storage for the editor widget.

Vertices live in a single insertion-ordered dict keyed by an integer handle.
Handles come from a counter that only grows, so a handle of a removed vertex
can never refer to a newer one. Each edge is stored twice: as a target handle
in the source's `outs` list and as a back-reference in the target's `ins`
list. The back-reference is only used to find the edges to drop when a vertex
goes away.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from geometry import Point, distance, point_in_oriented_rect

logger = logging.getLogger(__name__)

VertexRef = int


class GraphEditorError(Exception):
    """Base class for errors raised by the graph editor"""


class GraphInvariantError(GraphEditorError):
    """Raised by Graph.check_invariants when the adjacency lists disagree"""


@dataclass
class Vertex:
    ref: VertexRef
    label: str
    position: Point
    outs: List[VertexRef] = field(default_factory=list)
    ins: List[VertexRef] = field(default_factory=list)


# Mutation commands. The interaction state machine describes what should
# happen with these and Graph.commit applies them.

@dataclass(frozen=True)
class AddVertex:
    label: str
    position: Point


@dataclass(frozen=True)
class RemoveVertex:
    ref: VertexRef


@dataclass(frozen=True)
class AddEdge:
    source: VertexRef
    target: VertexRef


@dataclass(frozen=True)
class RemoveEdge:
    source: VertexRef
    index: int


@dataclass(frozen=True)
class MoveVertex:
    ref: VertexRef
    position: Point


@dataclass(frozen=True)
class SetLabel:
    ref: VertexRef
    label: str


class Graph:
    """Vertices in insertion order plus the edges embedded in their adjacency lists"""

    def __init__(self):
        self._vertices: Dict[VertexRef, Vertex] = {}
        self._next_ref = 0

    @classmethod
    def demo(cls) -> "Graph":
        """The graph the widget starts with"""
        graph = cls()
        hello = graph.add_vertex("Hello world!", (0.0, 0.0))
        smokes = graph.add_vertex("Holy smokes!", (200.0, 200.0))
        graph.add_edge(smokes, hello)
        return graph

    def __len__(self):
        return len(self._vertices)

    def __contains__(self, ref):
        return ref in self._vertices

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._vertices.values())

    def get(self, ref: VertexRef) -> Optional[Vertex]:
        return self._vertices.get(ref)

    def refs(self) -> List[VertexRef]:
        return list(self._vertices)

    def edges(self) -> Iterator[Tuple[VertexRef, int, VertexRef]]:
        """Yield (source, index in source.outs, target) in storage order"""
        for vertex in self._vertices.values():
            for index, target in enumerate(vertex.outs):
                yield vertex.ref, index, target

    def edge_count(self) -> int:
        return sum(len(v.outs) for v in self._vertices.values())

    def has_edge(self, source: VertexRef, target: VertexRef) -> bool:
        vertex = self._vertices.get(source)
        return vertex is not None and target in vertex.outs

    # Mutations

    def add_vertex(self, label: str, position: Point) -> VertexRef:
        """Append a new vertex and return its handle"""
        ref = self._next_ref
        self._next_ref += 1
        self._vertices[ref] = Vertex(ref, label, (float(position[0]), float(position[1])))
        logger.debug("Vertex created: '%s' at (%.2f, %.2f)", label, position[0], position[1])
        return ref

    def remove_vertex(self, ref: VertexRef) -> bool:
        """Remove a vertex and every edge touching it. Unknown handles are ignored."""
        vertex = self._vertices.get(ref)
        if vertex is None:
            logger.debug("Vertex %s not found, nothing removed", ref)
            return False

        # Drop the mirrored halves held by the neighbours before the vertex
        # itself goes, so no list ever points at a missing handle.
        for target in vertex.outs:
            neighbour = self._vertices.get(target)
            if neighbour is not None:
                neighbour.ins = [q for q in neighbour.ins if q != ref]
        for source in vertex.ins:
            neighbour = self._vertices.get(source)
            if neighbour is not None:
                neighbour.outs = [q for q in neighbour.outs if q != ref]

        del self._vertices[ref]
        logger.debug("Vertex removed: '%s' (%d outgoing, %d incoming edges dropped)",
                     vertex.label, len(vertex.outs), len(vertex.ins))
        return True

    def add_edge(self, source: VertexRef, target: VertexRef) -> bool:
        """
        Connect source -> target. Self-loops, unknown endpoints and duplicates
        are silently dropped; returns whether an edge was added.
        """
        if source == target:
            logger.debug("Self-loop on %s rejected", source)
            return False
        src = self._vertices.get(source)
        dst = self._vertices.get(target)
        if src is None or dst is None:
            logger.debug("Edge %s -> %s has a missing endpoint, ignored", source, target)
            return False
        if target in src.outs:
            logger.debug("Edge '%s' -> '%s' already exists", src.label, dst.label)
            return False

        src.outs.append(target)
        dst.ins.append(source)
        logger.debug("Edge created: '%s' -> '%s'", src.label, dst.label)
        return True

    def remove_edge(self, source: VertexRef, index: int) -> bool:
        """Remove the index-th outgoing edge of source together with its back-reference"""
        src = self._vertices.get(source)
        if src is None or not 0 <= index < len(src.outs):
            logger.debug("Edge %s[%s] not found, nothing removed", source, index)
            return False

        target = src.outs.pop(index)
        dst = self._vertices.get(target)
        if dst is not None and source in dst.ins:
            dst.ins.remove(source)
        logger.debug("Edge removed: '%s' -> '%s'", src.label, dst.label if dst else target)
        return True

    def move_vertex(self, ref: VertexRef, position: Point) -> bool:
        vertex = self._vertices.get(ref)
        if vertex is None:
            return False
        vertex.position = (float(position[0]), float(position[1]))
        return True

    def set_label(self, ref: VertexRef, label: str) -> bool:
        """Replace a vertex label verbatim; empty and duplicate labels are allowed"""
        vertex = self._vertices.get(ref)
        if vertex is None:
            return False
        logger.debug("Vertex renamed: '%s' to '%s'", vertex.label, label)
        vertex.label = label
        return True

    def commit(self, mutations: Iterable[object]) -> list:
        """
        Apply a sequence of mutation commands in order. This is the one path
        the editor uses to change the graph. Returns one result per command:
        the new handle for AddVertex, otherwise whether the command took effect.
        """
        results = []
        for mutation in mutations:
            if isinstance(mutation, AddVertex):
                results.append(self.add_vertex(mutation.label, mutation.position))
            elif isinstance(mutation, RemoveVertex):
                results.append(self.remove_vertex(mutation.ref))
            elif isinstance(mutation, AddEdge):
                results.append(self.add_edge(mutation.source, mutation.target))
            elif isinstance(mutation, RemoveEdge):
                results.append(self.remove_edge(mutation.source, mutation.index))
            elif isinstance(mutation, MoveVertex):
                results.append(self.move_vertex(mutation.ref, mutation.position))
            elif isinstance(mutation, SetLabel):
                results.append(self.set_label(mutation.ref, mutation.label))
            else:
                raise TypeError(f"Unknown graph mutation: {mutation!r}")
        return results

    # Queries

    def vertex_at(self, point: Point, radius: float) -> Optional[VertexRef]:
        """First vertex in storage order whose centre is strictly within radius of point"""
        for vertex in self._vertices.values():
            if distance(vertex.position, point) < radius:
                return vertex.ref
        return None

    def edge_at(self, point: Point, hit_width: float) -> Optional[Tuple[VertexRef, int]]:
        """
        If there is an edge at the given point, return its source handle along
        with the target's index in the source's `outs` list.
        """
        for source in self._vertices.values():
            for index, target in enumerate(source.outs):
                dst = self._vertices.get(target)
                if dst is None:
                    continue
                if point_in_oriented_rect(point, source.position, dst.position, hit_width):
                    return source.ref, index
        return None

    def check_invariants(self):
        """Raise GraphInvariantError if outs and ins are not mirror images"""
        for vertex in self._vertices.values():
            if len(set(vertex.outs)) != len(vertex.outs):
                raise GraphInvariantError(f"Duplicate outgoing edge on '{vertex.label}'")
            for target in vertex.outs:
                dst = self._vertices.get(target)
                if dst is None:
                    raise GraphInvariantError(f"'{vertex.label}' points at missing vertex {target}")
                if dst.ins.count(vertex.ref) != 1:
                    raise GraphInvariantError(
                        f"Edge '{vertex.label}' -> '{dst.label}' has {dst.ins.count(vertex.ref)} back-references")
            for source in vertex.ins:
                src = self._vertices.get(source)
                if src is None:
                    raise GraphInvariantError(f"'{vertex.label}' has back-reference to missing vertex {source}")
                if vertex.ref not in src.outs:
                    raise GraphInvariantError(
                        f"Back-reference '{src.label}' on '{vertex.label}' has no outgoing edge")
