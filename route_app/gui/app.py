import logging

from PySide6 import QtGui, QtWidgets

from .. import overlay
from ..targets import PointManager
from .canvas_widget import CanvasLabel


class MainWindow(QtWidgets.QMainWindow):

    # function to initialize main window
    def __init__(self):
        super().__init__()

        self.setWindowTitle("Route Planner - Points/Start/End/Solve")
        self.resize(1100, 700)

        self.manager = PointManager()

        central = QtWidgets.QWidget()
        self.setCentralWidget(central)

        main_layout = QtWidgets.QHBoxLayout(central)

        # --- Left controls ---
        left = QtWidgets.QVBoxLayout()
        main_layout.addLayout(left, 0)

        self.btn_start = QtWidgets.QPushButton("Select Start (S)")
        self.btn_end = QtWidgets.QPushButton("Select End (E)")
        self.btn_solve = QtWidgets.QPushButton("Solve (P)")
        self.btn_undo = QtWidgets.QPushButton("Undo (U)")
        self.btn_clear = QtWidgets.QPushButton("Clear Points (C)")

        for b in [self.btn_start, self.btn_end, self.btn_solve, self.btn_undo, self.btn_clear]:
            b.setMinimumHeight(36)
            left.addWidget(b)

        left.addSpacing(10)

        self.distance_label = QtWidgets.QLabel(overlay.distance_text(None))
        left.addWidget(self.distance_label)

        self.status_label = QtWidgets.QLabel("Status: -")
        self.status_label.setWordWrap(True)
        left.addWidget(self.status_label)

        left.addStretch(1)

        # --- Canvas in the middle ---
        self.canvas = CanvasLabel()
        main_layout.addWidget(self.canvas, 1)

        # --- Right panel: route list ---
        right = QtWidgets.QVBoxLayout()
        main_layout.addLayout(right, 0)

        right.addWidget(QtWidgets.QLabel("Points (pixels):"))
        self.points_list = QtWidgets.QListWidget()
        self.points_list.setMinimumWidth(260)
        right.addWidget(self.points_list, 1)

        self.canvas.clicked.connect(self.on_canvas_click)

        self.btn_start.clicked.connect(self.select_start)
        self.btn_end.clicked.connect(self.select_end)
        self.btn_solve.clicked.connect(self.solve)
        self.btn_undo.clicked.connect(self.undo_point)
        self.btn_clear.clicked.connect(self.clear_points)

        # Keyboard shortcuts
        QtGui.QShortcut(QtGui.QKeySequence("S"), self, activated=self.select_start)
        QtGui.QShortcut(QtGui.QKeySequence("E"), self, activated=self.select_end)
        QtGui.QShortcut(QtGui.QKeySequence("P"), self, activated=self.solve)
        QtGui.QShortcut(QtGui.QKeySequence("U"), self, activated=self.undo_point)
        QtGui.QShortcut(QtGui.QKeySequence("C"), self, activated=self.clear_points)

        self.refresh()

    # function to handle canvas clicks
    def on_canvas_click(self, x, y):
        msg = self.manager.handle_click((float(x), float(y)))
        if msg:
            QtWidgets.QMessageBox.warning(self, "Route Planner", msg)
        self.refresh()

    def select_start(self):
        self.manager.select_start()
        self.refresh()

    def select_end(self):
        self.manager.select_end()
        self.refresh()

    def undo_point(self):
        if self.manager.undo_last_point():
            logging.info("Undid last point.")
        self.refresh()

    def clear_points(self):
        self.manager.clear()
        logging.info("Points cleared.")
        self.refresh()

    # function to solve and show the route
    def solve(self):
        result = self.manager.solve()
        if not result.ok:
            QtWidgets.QMessageBox.warning(self, "Route Planner", result.error.message)
        self.refresh()

    # function to redraw canvas and side panels
    def refresh(self):
        self.canvas.show_manager(self.manager)
        self.distance_label.setText(overlay.distance_text(self.manager.result))

        start = "YES" if self.manager.start is not None else "NO"
        end = "YES" if self.manager.end is not None else "NO"
        self.status_label.setText(
            f"Start set: {start}\n"
            f"End set: {end}\n"
            f"Click mode: {self.manager.click_mode.name}\n"
            f"Points: {len(self.manager.points)}\n"
            f"Solved: {'YES' if self.manager.solved else 'NO'}"
        )

        # Show visiting order once solved, otherwise click order
        self.points_list.clear()
        if self.manager.solved:
            shown = self.manager.result.route
        else:
            shown = self.manager.points
        for i, (x, y) in enumerate(shown, start=1):
            self.points_list.addItem(f"{i}: ({x:.0f}, {y:.0f})")


def run():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s: %(message)s")
    app = QtWidgets.QApplication([])
    w = MainWindow()
    w.show()
    app.exec()


if __name__ == "__main__":
    run()
