"""
Style constants shared by the hit-tester and the render adapter.
"""

from dataclasses import dataclass, fields
from typing import Tuple

from graph_store import GraphEditorError

Color = Tuple[float, float, float]


class StyleError(GraphEditorError, ValueError):
    """Raised for style values that cannot be drawn or hit-tested"""


def _is_number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class EditorStyle:
    vertex_radius: float = 25.0
    vertex_outline_color: Color = (0.2, 0.2, 0.2)
    vertex_fill_color: Color = (0.99, 0.99, 1.0)

    edge_color: Color = (0.2, 0.2, 0.2)
    arrow_base: float = 15.0
    arrow_height: float = 10.0

    edge_thickness: float = 2.0
    outline_thickness: float = 2.0
    # clickable width of an edge, wider than the drawn stroke
    edge_hit_width: float = 6.0
    # keep vertices and the edge preview inside the widget
    clamp_to_bounds: bool = True

    def __post_init__(self):
        for name in ("vertex_radius", "arrow_base", "arrow_height",
                     "edge_thickness", "outline_thickness", "edge_hit_width"):
            value = getattr(self, name)
            if not _is_number(value) or value <= 0:
                raise StyleError(f"{name} must be a positive number, got {value!r}")
        for name in ("vertex_outline_color", "vertex_fill_color", "edge_color"):
            color = getattr(self, name)
            if (not isinstance(color, tuple) or len(color) != 3
                    or not all(_is_number(c) and 0.0 <= c <= 1.0 for c in color)):
                raise StyleError(f"{name} must be three components in [0, 1], got {color!r}")
        if not isinstance(self.clamp_to_bounds, bool):
            raise StyleError(f"clamp_to_bounds must be true or false, got {self.clamp_to_bounds!r}")

    @classmethod
    def field_names(cls):
        return [f.name for f in fields(cls)]
