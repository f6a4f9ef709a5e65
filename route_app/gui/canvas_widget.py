import cv2
from PySide6 import QtCore, QtGui, QtWidgets

from .. import config, overlay


# function to convert an OpenCV BGR image to a QImage
def bgr_to_qimage(img_bgr) -> QtGui.QImage:
    rgb = cv2.cvtColor(img_bgr, cv2.COLOR_BGR2RGB)
    h, w, ch = rgb.shape
    qimg = QtGui.QImage(rgb.data, w, h, ch * w, QtGui.QImage.Format_RGB888)
    # copy so the pixels outlive the numpy buffer
    return qimg.copy()


# function to map a widget position onto the letterboxed canvas
def widget_to_canvas(xw, yw, widget_w, widget_h,
                     canvas_w=config.CANVAS_W, canvas_h=config.CANVAS_H):
    """
    Convert a click inside a widget of size (widget_w, widget_h) to canvas pixels.

    The canvas is scaled uniformly to fit and centred, so the spare width or
    height becomes bars on both sides. Returns None for clicks on the bars.
    """
    scale = min(widget_w / canvas_w, widget_h / canvas_h)
    if scale <= 0:
        return None

    offset_x = (widget_w - canvas_w * scale) / 2.0
    offset_y = (widget_h - canvas_h * scale) / 2.0

    cx = (xw - offset_x) / scale
    cy = (yw - offset_y) / scale
    if cx < 0 or cy < 0 or cx >= canvas_w or cy >= canvas_h:
        return None

    return int(cx), int(cy)


class CanvasLabel(QtWidgets.QLabel):
    """
    Shows the rendered PointManager frame, scaled to fit, and emits clicks in
    canvas pixels (the coordinates the points are stored in).
    """
    clicked = QtCore.Signal(int, int)

    def __init__(self, canvas_w=config.CANVAS_W, canvas_h=config.CANVAS_H, parent=None):
        super().__init__(parent)
        self.canvas_w = canvas_w
        self.canvas_h = canvas_h

        self.setAlignment(QtCore.Qt.AlignCenter)
        self.setMinimumSize(canvas_w // 2, canvas_h // 2)
        self.setStyleSheet("background: #ddd;")

        self._frame = None

    # function to redraw from the manager state
    def show_manager(self, manager):
        img = overlay.render(manager, width=self.canvas_w, height=self.canvas_h)
        self._frame = QtGui.QPixmap.fromImage(bgr_to_qimage(img))
        self._rescale()

    def _rescale(self):
        if self._frame is not None:
            self.setPixmap(self._frame.scaled(self.size(), QtCore.Qt.KeepAspectRatio,
                                              QtCore.Qt.SmoothTransformation))

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self._rescale()

    def mousePressEvent(self, event: QtGui.QMouseEvent):
        if event.button() != QtCore.Qt.LeftButton:
            return

        pos = event.position()
        xy = widget_to_canvas(pos.x(), pos.y(), self.width(), self.height(),
                              self.canvas_w, self.canvas_h)
        if xy is not None:
            self.clicked.emit(*xy)
