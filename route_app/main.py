"""
main.py
OpenCV front-end: place points with the mouse, then plan and draw the route.

Current features:
- Left-click places a point (or the start/end point, see below)
- Greedy nearest-neighbour route from start through every point to end
- Arrowed route drawing and total distance readout

Keyboard controls:
- q : quit
- s : next click sets START
- e : next click sets END
- p : plan (solve) the route
- u : undo last point
- c : clear everything
"""

import logging

import cv2

from . import config
from . import overlay
from .targets import PointManager

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s: %(message)s")


# -----------------------------
# Mouse callback wiring
# -----------------------------
def make_mouse_handler(manager: PointManager, state: dict):
    """
    Returns a function that will be used as OpenCV's mouse callback.

    Rejection messages are written into state["message"] so the main loop can show them.
    """

    def on_mouse(event, x, y, flags, param):
        # only left click
        if event != cv2.EVENT_LBUTTONDOWN:
            return

        msg = manager.handle_click((float(x), float(y)))
        state["message"] = msg or ""

    return on_mouse


# function to build the status lines for the current state
def status_lines(manager: PointManager, message: str = "") -> list[str]:
    mode_txt = f"ClickMode: {manager.click_mode.name} (S=start, E=end, P=solve)"
    pts_txt = f"Points: {len(manager.points)}"
    lines = [mode_txt, pts_txt, overlay.distance_text(manager.result)]
    if message:
        lines.append(message)
    return lines


# function to handle a single key press, returns False to quit
def handle_key(manager: PointManager, state: dict, k: int) -> bool:
    if k == ord("q"):
        return False
    elif k == ord("s"):
        manager.select_start()
        logging.info("Click mode -> SET_START (next click sets start).")
    elif k == ord("e"):
        manager.select_end()
        logging.info("Click mode -> SET_END (next click sets end).")
    elif k == ord("p"):
        result = manager.solve()
        state["message"] = "" if result.ok else result.error.message
    elif k == ord("u"):
        if manager.undo_last_point():
            logging.info("Undid last point.")
    elif k == ord("c"):
        manager.clear()
        state["message"] = ""
        logging.info("Points cleared.")
    return True


def main():
    manager = PointManager()
    state = {"message": ""}

    cv2.namedWindow(config.WINDOW_NAME, cv2.WINDOW_AUTOSIZE)
    cv2.setMouseCallback(config.WINDOW_NAME, make_mouse_handler(manager, state))

    logging.info("Running. Press S/E then click to set start/end. Left-click to add points. Q quits.")

    while True:
        out = overlay.render(manager, status_lines=status_lines(manager, state["message"]))
        cv2.imshow(config.WINDOW_NAME, out)

        k = cv2.waitKey(20) & 0xFF
        if not handle_key(manager, state, k):
            break

    cv2.destroyAllWindows()


if __name__ == "__main__":
    main()
