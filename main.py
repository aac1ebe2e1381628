from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import (QMainWindow, QPlainTextEdit, QSplitter, QWidget,
                             QVBoxLayout)
from PyQt5.QtGui import QFont

from config import get_default_label, get_serialize_order, load_config, load_style
from graph_store import Graph
from graph_widget import GraphWidget
from interaction import GraphEditor
from version import __version__

WIDTH = 1080
HEIGHT = 720


class GraphEditorWindow(QMainWindow):
    """Graph editor on the left, a free text box and the graph text on the right"""

    def __init__(self, config=None):
        super().__init__()
        self.config = config if config is not None else load_config()
        self.initUI()

    def initUI(self):
        # Set window properties
        self.setWindowTitle(f"Graph Editor {__version__}")
        self.resize(WIDTH, HEIGHT)

        editor = GraphEditor(Graph.demo(),
                             style=load_style(self.config),
                             default_label=get_default_label(self.config))
        self.graph_widget = GraphWidget(editor, serialize_order=get_serialize_order(self.config))

        text_font = QFont("Monospace")
        text_font.setStyleHint(QFont.TypeWriter)
        text_font.setPointSize(12)

        self.type_text = QPlainTextEdit()
        self.type_text.setPlainText("Type text goes here")
        self.type_text.setFont(text_font)

        # Read-only view of the serialized graph
        self.graph_text = QPlainTextEdit()
        self.graph_text.setReadOnly(True)
        self.graph_text.setFont(text_font)
        self.graph_text.setPlainText(self.graph_widget.graph_text())
        self.graph_widget.graphChanged.connect(self.graph_text.setPlainText)

        right_split = QSplitter(Qt.Vertical)
        right_split.addWidget(self.type_text)
        right_split.addWidget(self.graph_text)
        right_split.setSizes([int(HEIGHT * 0.6), int(HEIGHT * 0.4)])

        main_split = QSplitter(Qt.Horizontal)
        main_split.addWidget(self.graph_widget)
        main_split.addWidget(right_split)
        main_split.setSizes([int(WIDTH * 0.7), int(WIDTH * 0.3)])

        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        layout = QVBoxLayout(central_widget)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(main_split)

        self.statusBar().showMessage(
            "Shift+click: add vertex | Shift+drag: connect | Drag: move | "
            "Right-click: delete | Double-click: rename")
