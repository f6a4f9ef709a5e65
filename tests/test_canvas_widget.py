import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6 import QtCore, QtWidgets
from PySide6.QtTest import QTest

from route_app.gui.canvas_widget import CanvasLabel, widget_to_canvas
from route_app.targets import PointManager


@pytest.fixture(scope="module")
def qapp():
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


@pytest.fixture
def canvas(qapp):
    # 800x600 canvas in a 1000x600 widget: scale 1, 100 px bars left and right
    widget = CanvasLabel(canvas_w=800, canvas_h=600)
    widget.resize(1000, 600)
    widget.show()
    qapp.processEvents()
    yield widget
    widget.close()


def _clicks(widget):
    got = []
    widget.clicked.connect(lambda x, y: got.append((x, y)))
    return got


def test_mapping_with_side_bars():
    assert widget_to_canvas(500, 300, 1000, 600, 800, 600) == (400, 300)
    assert widget_to_canvas(100, 0, 1000, 600, 800, 600) == (0, 0)
    assert widget_to_canvas(50, 300, 1000, 600, 800, 600) is None
    assert widget_to_canvas(950, 300, 1000, 600, 800, 600) is None


def test_mapping_with_top_bars_and_scaling():
    # 800x600 canvas in a 400x400 widget: scale 0.5, 50 px bars top and bottom
    assert widget_to_canvas(200, 200, 400, 400, 800, 600) == (400, 300)
    assert widget_to_canvas(200, 20, 400, 400, 800, 600) is None
    assert widget_to_canvas(200, 380, 400, 400, 800, 600) is None


def test_zero_sized_widget_maps_nothing():
    assert widget_to_canvas(0, 0, 0, 0, 800, 600) is None


def test_click_emits_canvas_pixel(canvas):
    got = _clicks(canvas)

    QTest.mouseClick(canvas, QtCore.Qt.LeftButton, QtCore.Qt.NoModifier, QtCore.QPoint(500, 300))

    assert got == [(400, 300)]


def test_click_on_bar_is_ignored(canvas):
    got = _clicks(canvas)

    QTest.mouseClick(canvas, QtCore.Qt.LeftButton, QtCore.Qt.NoModifier, QtCore.QPoint(50, 300))
    QTest.mouseClick(canvas, QtCore.Qt.RightButton, QtCore.Qt.NoModifier, QtCore.QPoint(500, 300))

    assert got == []


def test_show_manager_sets_pixmap(canvas):
    manager = PointManager()
    manager.handle_click((10, 10))

    canvas.show_manager(manager)

    assert canvas.pixmap() is not None
    assert not canvas.pixmap().isNull()
