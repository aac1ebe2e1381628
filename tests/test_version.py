import grapheditor
from version import __version__


def test_version_flag_prints_history_without_starting_gui(capsys, monkeypatch):
    def no_window(*args, **kwargs):
        raise AssertionError("window must not be created")

    monkeypatch.setattr(grapheditor, "GraphEditorWindow", no_window)
    grapheditor.main(["grapheditor", "--version"])

    out = capsys.readouterr().out
    assert f"Graph Editor v{__version__}" in out
    assert "Version 0.1.0" in out
