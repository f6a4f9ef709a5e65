"""
config.py
Central place for configuration constants.

Keep canvas size, colours, marker sizes and planner settings here instead of
scattered throughout the project.
"""

import math

# -----------------------------
# Canvas / display settings
# -----------------------------
CANVAS_W = 800
CANVAS_H = 600
WINDOW_NAME = "route-planner"

# Canvas background (BGR)
BACKGROUND_COLOUR = (255, 255, 255)

# -----------------------------
# Point markers
# -----------------------------
POINT_RADIUS_PX = 5

# Colours are BGR because everything is drawn with OpenCV.
POINT_COLOUR = (0, 0, 0)        # black
START_COLOUR = (0, 128, 0)      # green
END_COLOUR = (0, 0, 255)        # red

# -----------------------------
# Route drawing
# -----------------------------
ROUTE_COLOUR = (0, 0, 255)      # red outline through the whole route
ARROW_COLOUR = (255, 0, 0)      # blue leg + arrowhead
ROUTE_THICKNESS = 1

# Arrowhead geometry: side length and half-angle of the tip
ARROW_LENGTH_PX = 15
ARROW_HALF_ANGLE_RAD = math.pi / 6

# -----------------------------
# Planner
# -----------------------------
# Fewest intermediate points a route may be solved for
MIN_POINTS = 2

# -----------------------------
# Status text
# -----------------------------
STATUS_ORIGIN = (10, 20)
STATUS_LINE_GAP = 22
STATUS_COLOUR = (60, 60, 60)
DISTANCE_DECIMALS = 2
