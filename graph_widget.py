from PyQt5.QtCore import Qt, QPointF, QRectF, pyqtSignal
from PyQt5.QtGui import QPainter, QPen, QColor, QBrush, QFont, QPolygonF
from PyQt5.QtWidgets import QWidget, QInputDialog

from graph_store import Graph
from hit_test import VertexHit, locate
from interaction import (Button, GraphEditor, LabelEdit, PointerDrag,
                         PointerPress, PointerRelease)
from render_adapter import Disc, Label, Line, Triangle, build_scene
from serializer import Order, serialize

_BUTTONS = {
    Qt.LeftButton: Button.LEFT,
    Qt.RightButton: Button.RIGHT,
}


def _qcolor(rgb):
    return QColor.fromRgbF(rgb[0], rgb[1], rgb[2])


class GraphWidget(QWidget):
    """
    Interactive directed graph editor.

    Shift-click on empty space adds a vertex, shift-drag from a vertex to
    another one connects them, plain drag moves a vertex, right-click deletes
    the vertex or edge under the cursor and double-click renames a vertex.

    Widget space has its origin at the centre of the widget, so the graph
    stays centred when the widget is resized.
    """

    # serialized graph text, emitted after every change
    graphChanged = pyqtSignal(str)

    def __init__(self, editor=None, serialize_order=Order.INSERTION, parent=None):
        super().__init__(parent)
        self.editor = editor if editor is not None else GraphEditor(Graph.demo())
        self.serialize_order = serialize_order

        # where the left button went down, for cumulative drag deltas
        self._press_point = None

        self.background_color = QColor.fromRgbF(0.97, 0.97, 0.97)
        self.label_font = QFont()
        self.label_font.setPointSize(9)

        self.setMinimumSize(200, 200)
        self.setFocusPolicy(Qt.ClickFocus)

    @property
    def graph(self):
        return self.editor.graph

    def graph_text(self):
        return serialize(self.editor.graph, self.serialize_order)

    def to_widget_space(self, pos):
        """Map a Qt position (top-left origin) to widget space"""
        return (pos.x() - self.width() / 2.0, pos.y() - self.height() / 2.0)

    def widget_bounds(self):
        half_w = self.width() / 2.0
        half_h = self.height() / 2.0
        return (-half_w, -half_h, half_w, half_h)

    def feed(self, events):
        """Hand a batch of input events to the editor and refresh if anything changed"""
        self.editor.bounds = self.widget_bounds()
        if self.editor.handle_events(events):
            self.update()
            self.graphChanged.emit(self.graph_text())

    def mousePressEvent(self, event):
        """Handle mouse press events"""
        button = _BUTTONS.get(event.button())
        if button is None:
            super().mousePressEvent(event)
            return

        point = self.to_widget_space(event.localPos())
        if button == Button.LEFT:
            self._press_point = point
        shift = bool(event.modifiers() & Qt.ShiftModifier)
        self.feed([PointerPress(button, point, shift)])
        event.accept()

    def mouseMoveEvent(self, event):
        """Turn movement with the left button held into drag events"""
        if not (event.buttons() & Qt.LeftButton) or self._press_point is None:
            super().mouseMoveEvent(event)
            return

        point = self.to_widget_space(event.localPos())
        delta = (point[0] - self._press_point[0], point[1] - self._press_point[1])
        self.feed([PointerDrag(Button.LEFT, point, delta)])
        event.accept()

    def mouseReleaseEvent(self, event):
        """Handle mouse release events"""
        button = _BUTTONS.get(event.button())
        if button is None:
            super().mouseReleaseEvent(event)
            return

        if button == Button.LEFT:
            self._press_point = None
        self.feed([PointerRelease(button, self.to_widget_space(event.localPos()))])
        event.accept()

    def mouseDoubleClickEvent(self, event):
        """Double-click on a vertex opens the label editor"""
        if event.button() == Qt.LeftButton:
            hit = locate(self.editor.graph, self.to_widget_space(event.localPos()), self.editor.style)
            if isinstance(hit, VertexHit):
                self.edit_label(hit.ref)
                event.accept()
                return
        super().mouseDoubleClickEvent(event)

    def edit_label(self, ref):
        """Ask for a new label for a vertex using a dialog"""
        vertex = self.editor.graph.get(ref)
        if vertex is None:
            return

        new_label, ok = QInputDialog.getText(
            self,
            'Edit Vertex Label',
            'Enter new label:',
            text=vertex.label
        )
        if ok:
            self.apply_label(ref, new_label)

    def apply_label(self, ref, label):
        self.feed([LabelEdit(ref, label)])

    def paintEvent(self, event):
        """Paint the graph, the edge preview and the vertex labels"""
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)
        painter.setRenderHint(QPainter.TextAntialiasing)
        painter.fillRect(self.rect(), self.background_color)
        painter.translate(self.width() / 2.0, self.height() / 2.0)
        painter.setFont(self.label_font)

        scene = build_scene(self.editor.graph, self.editor.mode, self.editor.style)
        radius = self.editor.style.vertex_radius

        for primitive in scene.primitives:
            if isinstance(primitive, Line):
                pen = QPen(_qcolor(primitive.color), primitive.thickness, Qt.SolidLine, Qt.RoundCap)
                painter.setPen(pen)
                painter.drawLine(QPointF(*primitive.start), QPointF(*primitive.end))

            elif isinstance(primitive, Triangle):
                painter.setPen(Qt.NoPen)
                painter.setBrush(QBrush(_qcolor(primitive.color)))
                painter.drawPolygon(QPolygonF([QPointF(*p) for p in primitive.points]))

            elif isinstance(primitive, Disc):
                painter.setPen(QPen(_qcolor(primitive.outline), primitive.outline_thickness))
                painter.setBrush(QBrush(_qcolor(primitive.fill)))
                painter.drawEllipse(QPointF(*primitive.center), primitive.radius, primitive.radius)

            elif isinstance(primitive, Label):
                painter.setPen(QPen(Qt.black))
                # let the label spill outside the disc so long labels stay readable
                rect = QRectF(primitive.center[0] - 3 * radius, primitive.center[1] - radius,
                              6 * radius, 2 * radius)
                painter.drawText(rect, Qt.AlignCenter, primitive.text)

        painter.end()
