"""
Interaction state machine for the graph editor.

The host feeds pointer events in widget-local coordinates. Each event is
looked at against the current mode and a read-only view of the graph; the
result is a list of mutation commands plus the next mode. The commands are
then applied through Graph.commit before the next event is considered.

    Idle          left press + shift on vertex  -> CreatingEdge
    Idle          left press + shift on empty   -> add vertex, stay Idle
    Idle          left press on vertex          -> MovingVertex
    MovingVertex  left press on vertex          -> MovingVertex (re-anchored)
    MovingVertex  left drag                     -> move vertex to anchor + delta
    CreatingEdge  left drag                     -> move preview point
    CreatingEdge  left release on other vertex  -> add edge, Idle
    CreatingEdge  left release elsewhere        -> Idle (preview discarded)
    MovingVertex  left release                  -> Idle
    Idle          right press on vertex         -> remove vertex
    Idle          right press on edge           -> remove edge

Anything else is ignored.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple, Union

from geometry import Bounds, Point, clamp_point
from graph_store import (AddEdge, AddVertex, Graph, MoveVertex, RemoveEdge,
                         RemoveVertex, SetLabel, VertexRef)
from hit_test import EdgeHit, VertexHit, locate
from style import EditorStyle

logger = logging.getLogger(__name__)

DEFAULT_LABEL = "new node"


class Button(Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class PointerPress:
    button: Button
    point: Point
    shift: bool = False


@dataclass(frozen=True)
class PointerDrag:
    button: Button
    point: Point
    # offset of the pointer from where the button went down
    total_delta: Point


@dataclass(frozen=True)
class PointerRelease:
    button: Button
    point: Point


@dataclass(frozen=True)
class LabelEdit:
    """Full replacement label for one vertex, coming from the label editor"""
    vertex: VertexRef
    label: str


InputEvent = Union[PointerPress, PointerDrag, PointerRelease, LabelEdit]


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class MovingVertex:
    vertex: VertexRef
    # position of the vertex when the drag began; drag deltas are applied to
    # this rather than to the live position
    anchor: Point


@dataclass(frozen=True)
class CreatingEdge:
    source: VertexRef
    preview: Point


Mode = Union[Idle, MovingVertex, CreatingEdge]

IDLE = Idle()


class GraphEditor:
    """Owns the graph and the current mode, and turns input events into graph changes"""

    def __init__(self, graph: Optional[Graph] = None, style: Optional[EditorStyle] = None,
                 bounds: Optional[Bounds] = None, default_label: str = DEFAULT_LABEL):
        self.graph = graph if graph is not None else Graph()
        self.style = style if style is not None else EditorStyle()
        self.bounds = bounds
        self.default_label = default_label
        self.mode: Mode = IDLE

    def handle_events(self, events: Iterable[InputEvent]) -> bool:
        """Process one frame's worth of events in arrival order. Returns True if anything changed."""
        changed = False
        for event in events:
            if self.handle_event(event):
                changed = True
        return changed

    def handle_event(self, event: InputEvent) -> bool:
        mutations, mode = self._transition(event)
        mode_changed = mode != self.mode
        if mode_changed:
            logger.debug("Mode %s -> %s", self.mode, mode)
        self.mode = mode
        if mutations:
            self.graph.commit(mutations)
        return mode_changed or bool(mutations)

    def preview(self) -> Optional[Tuple[Point, Point]]:
        """(source position, pointer) of the edge being dragged out, if any"""
        if isinstance(self.mode, CreatingEdge):
            source = self.graph.get(self.mode.source)
            if source is not None:
                return source.position, self.mode.preview
        return None

    def _transition(self, event: InputEvent) -> Tuple[List[object], Mode]:
        mode = self.mode
        if isinstance(event, LabelEdit):
            if event.vertex in self.graph:
                return [SetLabel(event.vertex, event.label)], mode
            return [], mode

        if isinstance(event, PointerPress):
            if event.button == Button.LEFT:
                return self._left_press(event)
            if event.button == Button.RIGHT:
                return self._right_press(event)

        elif isinstance(event, PointerDrag) and event.button == Button.LEFT:
            return self._left_drag(event)

        elif isinstance(event, PointerRelease) and event.button == Button.LEFT:
            return self._left_release(event)

        return [], mode

    def _left_press(self, event: PointerPress) -> Tuple[List[object], Mode]:
        mode = self.mode
        hit = locate(self.graph, event.point, self.style)

        if isinstance(mode, Idle) and event.shift:
            # start creating edge
            if isinstance(hit, VertexHit):
                return [], CreatingEdge(hit.ref, self._clamp_preview(event.point))
            # create node
            if not isinstance(hit, EdgeHit):
                return [AddVertex(self.default_label, event.point)], mode
            return [], mode

        # start moving vertex, or grab again without an intervening release
        if isinstance(mode, (Idle, MovingVertex)) and isinstance(hit, VertexHit):
            return [], MovingVertex(hit.ref, self.graph.get(hit.ref).position)

        return [], mode

    def _right_press(self, event: PointerPress) -> Tuple[List[object], Mode]:
        mode = self.mode
        if not isinstance(mode, Idle):
            return [], mode

        hit = locate(self.graph, event.point, self.style)
        if isinstance(hit, VertexHit):
            return [RemoveVertex(hit.ref)], mode
        if isinstance(hit, EdgeHit):
            return [RemoveEdge(hit.source, hit.index)], mode
        return [], mode

    def _left_drag(self, event: PointerDrag) -> Tuple[List[object], Mode]:
        mode = self.mode

        if isinstance(mode, MovingVertex):
            if mode.vertex not in self.graph:
                logger.debug("Vertex %s vanished while moving", mode.vertex)
                return [], IDLE
            position = (mode.anchor[0] + event.total_delta[0],
                        mode.anchor[1] + event.total_delta[1])
            if self._clamping():
                position = clamp_point(position, self.bounds, self.style.vertex_radius)
            return [MoveVertex(mode.vertex, position)], mode

        if isinstance(mode, CreatingEdge):
            if mode.source not in self.graph:
                logger.debug("Edge source %s vanished while dragging", mode.source)
                return [], IDLE
            return [], CreatingEdge(mode.source, self._clamp_preview(event.point))

        return [], mode

    def _left_release(self, event: PointerRelease) -> Tuple[List[object], Mode]:
        mode = self.mode

        # finish creating edge
        if isinstance(mode, CreatingEdge):
            hit = locate(self.graph, event.point, self.style)
            if (isinstance(hit, VertexHit) and hit.ref != mode.source
                    and mode.source in self.graph
                    and not self.graph.has_edge(mode.source, hit.ref)):
                return [AddEdge(mode.source, hit.ref)], IDLE
            return [], IDLE

        if isinstance(mode, MovingVertex):
            return [], IDLE

        return [], mode

    def _clamping(self) -> bool:
        return self.bounds is not None and self.style.clamp_to_bounds

    def _clamp_preview(self, point: Point) -> Point:
        if self._clamping():
            return clamp_point(point, self.bounds)
        return point
