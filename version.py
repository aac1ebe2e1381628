"""
Version information for the Graph Editor
"""

__version__ = "0.2.0"

# Version history
VERSION_HISTORY = """
Version 0.2.0
=============
Label editing and configurable text output.

New Features:
- Double-click a vertex to edit its label
- Graph text can be ordered by insertion or by label
- Style and default label read from settings.json
- Vertices and the edge preview stay inside the widget while dragging

Bug Fixes:
- Deleting an edge now removes only its own back-reference on the target
- Settings with invalid style values fall back to the default style
- Arrows between overlapping vertices are no longer drawn backwards

Version 0.1.0
=============
Initial release.

Features:
- Shift+click on empty canvas creates a vertex
- Drag a vertex to move it
- Shift+drag from one vertex to another creates a directed edge
- Right-click deletes the vertex (with its edges) or the edge under the cursor
- Serialized graph text shown next to the editor
"""

def print_version():
    """Print version information"""
    print(f"Graph Editor v{__version__}")
    print()
    print(VERSION_HISTORY)

if __name__ == "__main__":
    print_version()
