"""
Graph Editor - interactive directed graph editing demo
Main entry point for the application.

Run with --version to print the version history instead of opening the window.
"""

import sys
from PyQt5.QtWidgets import QApplication

from config import setup_logging
from main import GraphEditorWindow
from version import print_version


def main(argv=None):
    argv = sys.argv if argv is None else argv
    if "--version" in argv[1:]:
        print_version()
        return

    setup_logging()
    app = QApplication(argv)

    # Set application style
    app.setStyle("Fusion")

    # Create and show the main window
    window = GraphEditorWindow()
    window.show()

    # Run the application
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
