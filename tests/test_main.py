import logging

from route_app.main import handle_key, make_mouse_handler, status_lines
from route_app.planner import Point
from route_app.targets import ClickMode, PointManager

import cv2


def _click(handler, x, y):
    handler(cv2.EVENT_LBUTTONDOWN, x, y, 0, None)


def test_keys_drive_the_manager():
    manager = PointManager()
    state = {"message": ""}
    handler = make_mouse_handler(manager, state)

    assert handle_key(manager, state, ord("s"))
    _click(handler, 0, 0)
    assert handle_key(manager, state, ord("e"))
    _click(handler, 10, 0)
    _click(handler, 5, 5)
    _click(handler, 5, -5)

    assert handle_key(manager, state, ord("p"))

    assert manager.solved
    assert manager.result.route[1] == Point(5, 5)
    assert state["message"] == ""


def test_failed_solve_sets_message():
    manager = PointManager()
    state = {"message": ""}

    handle_key(manager, state, ord("p"))

    assert state["message"] == "Please add at least two points."


def test_rejected_click_sets_message():
    manager = PointManager()
    state = {"message": ""}
    handler = make_mouse_handler(manager, state)

    handle_key(manager, state, ord("s"))
    _click(handler, 1, 1)
    handle_key(manager, state, ord("s"))
    _click(handler, 2, 2)

    assert "Start point already selected" in state["message"]


def test_non_left_clicks_are_ignored():
    manager = PointManager()
    handler = make_mouse_handler(manager, {"message": ""})

    handler(cv2.EVENT_RBUTTONDOWN, 3, 3, 0, None)
    handler(cv2.EVENT_MOUSEMOVE, 3, 3, 0, None)

    assert manager.points == []


def test_undo_clear_and_quit():
    manager = PointManager()
    state = {"message": "old"}
    handler = make_mouse_handler(manager, state)
    _click(handler, 1, 1)
    _click(handler, 2, 2)

    handle_key(manager, state, ord("u"))
    assert manager.points == [Point(1, 1)]

    handle_key(manager, state, ord("c"))
    assert manager.points == []
    assert manager.click_mode is ClickMode.ADD_POINT

    assert handle_key(manager, state, ord("q")) is False


def test_status_lines_include_distance_and_message():
    manager = PointManager()

    lines = status_lines(manager, "hello")

    assert lines[0].startswith("ClickMode: ADD_POINT")
    assert "Total distance: -" in lines
    assert lines[-1] == "hello"


def test_undo_only_logged_when_a_point_goes(caplog):
    manager = PointManager()
    state = {"message": ""}

    with caplog.at_level(logging.INFO):
        handle_key(manager, state, ord("u"))
    assert "Undid last point." not in caplog.text

    make_mouse_handler(manager, state)(cv2.EVENT_LBUTTONDOWN, 4, 4, 0, None)
    with caplog.at_level(logging.INFO):
        handle_key(manager, state, ord("u"))
    assert "Undid last point." in caplog.text
