"""
targets.py
Manages:
- Start and end points
- List of clicked points to visit
- "Click mode" so a click can mean "set start", "set end" or "add point"
- The last solved route
"""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto

from . import config
from .planner import Point, RouteResult, build_route

# define click modes - point adding, start setting or end setting
class ClickMode(Enum):
    ADD_POINT = auto()
    SET_START = auto()
    SET_END = auto()


@dataclass
class PointManager:
    start: Point | None = None
    end: Point | None = None

    # Points to visit, in the order they were clicked
    points: list[Point] = field(default_factory=list)

    # What a click means right now
    click_mode: ClickMode = ClickMode.ADD_POINT

    # Outcome of the last solve (None until solve() is called)
    result: RouteResult | None = None

    @property
    def solved(self) -> bool:
        return self.result is not None and self.result.ok

    # function to set click mode
    def set_click_mode(self, mode: ClickMode) -> None:
        self.click_mode = mode

    def select_start(self) -> None:
        self.set_click_mode(ClickMode.SET_START)

    def select_end(self) -> None:
        self.set_click_mode(ClickMode.SET_END)

    # function to handle a click on the canvas
    def handle_click(self, xy: tuple[float, float]) -> str | None:
        """
        Apply a click according to the current click mode.

        Returns a message when the click is rejected, otherwise None.
        Clicks are ignored once a route has been solved.
        """
        if self.solved:
            logging.info("Click ignored: route already solved")
            return None

        pt = Point(float(xy[0]), float(xy[1]))

        if self.click_mode == ClickMode.SET_START:
            if self.start is not None:
                msg = "Start point already selected. Clear it to select a new one."
                logging.warning(msg)
                return msg
            self.start = pt
            logging.info("START set: (%.1f, %.1f)", pt.x, pt.y)
            # After setting start, switch back to adding points
            self.set_click_mode(ClickMode.ADD_POINT)

        elif self.click_mode == ClickMode.SET_END:
            if self.end is not None:
                msg = "End point already selected. Clear it to select a new one."
                logging.warning(msg)
                return msg
            self.end = pt
            logging.info("END set: (%.1f, %.1f)", pt.x, pt.y)
            self.set_click_mode(ClickMode.ADD_POINT)

        else:
            self.points.append(pt)
            logging.info("Point added: (%.1f, %.1f) (total=%d)", pt.x, pt.y, len(self.points))

        # Any edit invalidates a previous failed attempt
        self.result = None
        return None

    # function to undo last point
    def undo_last_point(self) -> bool:
        """Remove the most recent point. Returns True if one was removed."""
        if self.solved or not self.points:
            return False
        self.points.pop()
        self.result = None
        return True

    # function to clear everything
    def clear(self) -> None:
        self.start = None
        self.end = None
        self.points.clear()
        self.click_mode = ClickMode.ADD_POINT
        self.result = None

    # function to solve the route
    def solve(self) -> RouteResult:
        """
        Plan the route through the current points.

        A solved manager hands back its existing result; clear() to start over.
        """
        if self.solved:
            return self.result

        self.result = build_route(
            self.start,
            self.end,
            list(self.points),
            min_points=config.MIN_POINTS,
        )

        if self.result.ok:
            logging.info("Route solved: %d points, total distance %.2f",
                         len(self.points), self.result.length)
        else:
            logging.warning("Route not solved: %s", self.result.error.message)

        return self.result
