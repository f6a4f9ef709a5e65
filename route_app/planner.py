"""
planner.py
Greedy route planning from a start point, through every placed point, to an end point.

Nearest-neighbour heuristic: from the current point always move to the closest
point not yet visited. This is not an optimal tour, but it is O(n^2) and fine
for the tens to low hundreds of points placed by hand.

Nothing in here logs or raises for bad input. Failures come back as a
RouteResult carrying a RouteError so the caller can show the message.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, NamedTuple, Optional, Sequence, Tuple


class Point(NamedTuple):
    x: float
    y: float


Route = Tuple[Point, ...]


class RouteError(Enum):
    INSUFFICIENT_POINTS = "Please add at least two points."
    MISSING_ENDPOINT = "Please specify both start and end points."
    NO_PATH_FOUND = "No path found between the start and end points."

    @property
    def message(self) -> str:
        return self.value


@dataclass(frozen=True)
class RouteResult:
    route: Route = ()
    length: float = 0.0
    error: Optional[RouteError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failure(cls, error: RouteError) -> "RouteResult":
        return cls(error=error)


# function to compute distance between two points
def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(b[0] - a[0], b[1] - a[1])


# function to compute total length of a route
def route_length(route: Sequence[Point]) -> float:
    """Sum of the leg lengths along the route, in order."""
    return sum(distance(a, b) for a, b in zip(route[:-1], route[1:]))


# function to pick the nearest remaining point
def _nearest_index(current: Point, remaining: list, connected=None) -> Optional[int]:
    """
    Index of the closest entry in `remaining`, or None if nothing is reachable.

    Strict '<' so the first of several equally close points wins.
    """
    best_idx = None
    best_dist = 0.0

    for idx, candidate in enumerate(remaining):
        if connected is not None and not connected(current, candidate):
            continue
        d = distance(current, candidate)
        # first reachable candidate always counts, even if the distance overflowed to inf
        if best_idx is None or d < best_dist:
            best_idx = idx
            best_dist = d

    return best_idx


# function to build the greedy route
def build_route(
    start: Optional[Point],
    end: Optional[Point],
    points: Sequence[Point],
    min_points: int = 2,
    connected: Optional[Callable[[Point, Point], bool]] = None,
) -> RouteResult:
    """
    Returns the nearest-neighbour route start -> every point -> end.

    Path definition:
      start -> points (greedy order) -> end

    points is never modified; the builder walks its own copy and removes
    visited entries by position, so points sharing the same coordinates are
    each visited once (earliest entry first).

    connected(a, b) optionally says whether a leg a -> b may be taken. Without
    it every point can reach every other one and NO_PATH_FOUND cannot happen.
    """
    if points is None or len(points) < min_points:
        return RouteResult.failure(RouteError.INSUFFICIENT_POINTS)

    if start is None or end is None:
        return RouteResult.failure(RouteError.MISSING_ENDPOINT)

    start = Point(*start)
    end = Point(*end)
    remaining = [Point(*p) for p in points]

    route = [start]
    current = start

    while remaining:
        idx = _nearest_index(current, remaining, connected)
        if idx is None:
            return RouteResult.failure(RouteError.NO_PATH_FOUND)

        current = remaining.pop(idx)
        route.append(current)

    if connected is not None and not connected(current, end):
        return RouteResult.failure(RouteError.NO_PATH_FOUND)

    route.append(end)
    return RouteResult(route=tuple(route), length=route_length(route))
