"""
overlay.py
All drawing/visualisation goes here.

This keeps the front-ends clean:
- compute -> then draw.
"""

import cv2
import numpy as np

from . import config

# function to create a blank canvas
def new_canvas(width=config.CANVAS_W, height=config.CANVAS_H):
    """Blank BGR image filled with the background colour."""
    canvas = np.empty((height, width, 3), dtype=np.uint8)
    canvas[:] = config.BACKGROUND_COLOUR
    return canvas

# function to draw a single point marker
def draw_point(out_bgr, pt, colour=config.POINT_COLOUR, radius=config.POINT_RADIUS_PX):
    x, y = int(round(pt[0])), int(round(pt[1]))
    cv2.circle(out_bgr, (x, y), radius, colour, -1)

# function to draw placed points, start and end
def draw_points(out_bgr, points, start=None, end=None):
    """
    Draw the placed points plus start/end markers.

    - Points are black dots.
    - Start is green, end is red (drawn last so they stay on top).
    """
    for pt in points:
        draw_point(out_bgr, pt)

    if start is not None:
        draw_point(out_bgr, start, colour=config.START_COLOUR)
    if end is not None:
        draw_point(out_bgr, end, colour=config.END_COLOUR)

# function to compute arrowhead corners
def arrow_head(a, b, length=config.ARROW_LENGTH_PX, half_angle=config.ARROW_HALF_ANGLE_RAD):
    """
    Return the two base corners of an arrowhead whose tip sits at b, pointing a -> b.

    Returns a (2,2) float array.
    """
    angle = np.arctan2(b[1] - a[1], b[0] - a[0])
    angles = np.array([angle - half_angle, angle + half_angle])

    xs = b[0] - length * np.cos(angles)
    ys = b[1] - length * np.sin(angles)
    return np.stack([xs, ys], axis=1)

# function to draw one arrowed leg
def draw_arrow(out_bgr, a, b, colour=config.ARROW_COLOUR, thickness=config.ROUTE_THICKNESS):
    """Straight segment a -> b with a filled triangular head at b."""
    pa = (int(round(a[0])), int(round(a[1])))
    pb = (int(round(b[0])), int(round(b[1])))
    cv2.line(out_bgr, pa, pb, colour, thickness)

    corners = arrow_head(a, b)
    tri = np.vstack([[b[0], b[1]], corners])
    cv2.fillPoly(out_bgr, [np.round(tri).astype(np.int32)], colour)

# function to draw the solved route
def draw_route(out_bgr, route, colour=config.ROUTE_COLOUR, thickness=config.ROUTE_THICKNESS):
    """
    Draw a route as a polyline, then an arrow along every leg.

    route: sequence of (x,y) points, e.g. [start, p1, p2, ..., end]
    """
    if route is None or len(route) < 2:
        return

    pts = np.round(np.asarray(route, dtype=float)).astype(np.int32)
    cv2.polylines(out_bgr, [pts], False, colour, thickness)

    for a, b in zip(route[:-1], route[1:]):
        draw_arrow(out_bgr, a, b)

# function to draw status info
def draw_status(out_bgr, lines, origin=config.STATUS_ORIGIN, line_gap=config.STATUS_LINE_GAP):
    """
    Draw a stack of status lines at the top-left of the image.
    """
    x, y = origin
    for i, text in enumerate(lines):
        yy = y + i * line_gap
        cv2.putText(out_bgr, text, (x, yy),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.5, config.STATUS_COLOUR, 1)

# function to format the total distance of a result
def distance_text(result):
    if result is None or not result.ok:
        return "Total distance: -"
    return f"Total distance: {result.length:.{config.DISTANCE_DECIMALS}f}"

# function to render the full frame for a point manager
def render(manager, width=config.CANVAS_W, height=config.CANVAS_H, status_lines=None):
    """
    Draw everything the manager holds onto a fresh canvas.

    The route goes underneath the point markers so dots stay visible.
    """
    out = new_canvas(width, height)

    if manager.solved:
        draw_route(out, manager.result.route)

    draw_points(out, manager.points, start=manager.start, end=manager.end)

    if status_lines:
        draw_status(out, status_lines)

    return out
