"""
Small PyQt5 desktop dashboard for the music streaming CSV exports.

I reuse the same ideas from the browser version:
- The five CSV files are fetched from the Django backend under `/data/`.
- Matplotlib draws each chart into its own canvas in a grid.
- A worker thread runs the fetch/parse pipelines so the window does not
  freeze while the files download.

All the data handling lives in the `streamdash` package next to this file;
this module is only the window.
"""
import logging
import sys
from dataclasses import dataclass
from typing import Dict, List

import requests
from PyQt5.QtCore import QThread, QTimer, pyqtSignal
from PyQt5.QtWidgets import (
    QApplication,
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QGridLayout,
    QPushButton,
    QLabel,
    QFileDialog,
    QMessageBox,
)

from matplotlib.backends.backend_qt5agg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.figure import Figure

from streamdash import CHARTS, ChartConfig, ChartPayload, DashboardConfig, PipelineOutcome, initialize
from streamdash.render import BACKGROUND, draw_chart, draw_placeholder

logger = logging.getLogger("streamdash.desktop")


@dataclass
class DashboardResult:
    outcomes: List[PipelineOutcome]

    @property
    def failed(self) -> List[PipelineOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.ok]


@dataclass
class SaveResult:
    ok: bool
    error_message: str | None
    path: str | None


class DashboardWorker(QThread):
    """Background job that runs `initialize()` for all five charts."""

    # Emitted from the pipeline threads; Qt queues it onto the GUI thread.
    chart_ready = pyqtSignal(object)
    finished_with_result = pyqtSignal(object)

    def __init__(self, config: DashboardConfig):
        super().__init__()
        self.config = config

    def run(self) -> None:
        outcomes = initialize(render=self.chart_ready.emit, config=self.config)
        self.finished_with_result.emit(DashboardResult(outcomes=outcomes))


class SummaryPdfWorker(QThread):
    """Background job that downloads the PDF summary from the backend."""

    finished_with_result = pyqtSignal(object)

    def __init__(self, config: DashboardConfig, target_path: str):
        super().__init__()
        self.config = config
        self.target_path = target_path

    def run(self) -> None:
        try:
            response = requests.get(
                self.config.resource_url("api/summary/pdf/"),
                timeout=self.config.timeout,
            )
            if response.status_code != 200:
                result = SaveResult(
                    ok=False,
                    error_message=f"Server answered with HTTP {response.status_code}.",
                    path=None,
                )
            else:
                with open(self.target_path, "wb") as f:
                    f.write(response.content)
                result = SaveResult(ok=True, error_message=None, path=self.target_path)
        except (requests.RequestException, OSError) as exc:
            result = SaveResult(ok=False, error_message=str(exc), path=None)

        self.finished_with_result.emit(result)


class ChartCanvas(FigureCanvas):
    """One Matplotlib canvas per chart on the dashboard grid."""

    def __init__(self, chart: ChartConfig, parent: QWidget | None = None):
        self.chart = chart
        self.fig = Figure(figsize=(5, 3), facecolor=BACKGROUND)
        super().__init__(self.fig)
        self.setParent(parent)
        self.ax = self.fig.add_subplot(111)
        self.show_placeholder("Loading...")

    def show_placeholder(self, message: str) -> None:
        draw_placeholder(self.ax, message, title=self.chart.title)
        self.draw()

    def plot_payload(self, payload: ChartPayload) -> None:
        draw_chart(self.ax, payload)
        self.fig.tight_layout()
        self.draw()


class MainWindow(QWidget):
    def __init__(self, config: DashboardConfig | None = None):
        super().__init__()
        self.setWindowTitle("Music Streaming Dashboard - Desktop")
        self.setMinimumSize(1100, 700)

        self.config = config or DashboardConfig()
        self.canvases: Dict[str, ChartCanvas] = {}
        self.current_worker: DashboardWorker | None = None
        self.current_pdf_worker: SummaryPdfWorker | None = None
        self._loaded_once = False

        self._build_ui()

    def _build_ui(self) -> None:
        main_layout = QVBoxLayout()
        main_layout.setContentsMargins(16, 16, 16, 16)
        main_layout.setSpacing(12)

        title = QLabel("Music Streaming Dashboard")
        title.setStyleSheet("color: #0f766e; font-size: 20px; font-weight: 600;")
        main_layout.addWidget(title)

        subtitle = QLabel(f"Streaming statistics loaded from {self.config.base_url}")
        subtitle.setStyleSheet("color: #cbd5f5; font-size: 11px;")
        main_layout.addWidget(subtitle)

        button_row = QHBoxLayout()
        self.reload_button = QPushButton("Reload")
        self.reload_button.setStyleSheet(
            "background-color: #0891b2; color: #020617; padding: 6px 12px; border-radius: 4px;"
        )
        self.reload_button.clicked.connect(self.reload_dashboard)

        self.pdf_button = QPushButton("Save summary PDF")
        self.pdf_button.setStyleSheet(
            "background-color: #0f766e; color: #e5e7eb; padding: 6px 12px; border-radius: 4px;"
        )
        self.pdf_button.clicked.connect(self.on_save_pdf_clicked)

        button_row.addWidget(self.reload_button)
        button_row.addWidget(self.pdf_button)
        button_row.addStretch()
        main_layout.addLayout(button_row)

        # Info label for errors / status
        self.info_label = QLabel("")
        self.info_label.setStyleSheet("color: #fecaca; font-size: 11px;")
        main_layout.addWidget(self.info_label)

        # Three charts on the first row, two on the second.
        grid = QGridLayout()
        grid.setSpacing(10)
        for index, chart in enumerate(CHARTS):
            canvas = ChartCanvas(chart, self)
            self.canvases[chart.key] = canvas
            grid.addWidget(canvas, index // 3, index % 3)
        main_layout.addLayout(grid)

        self.setLayout(main_layout)
        self.setStyleSheet("background-color: #020617;")  # slate‑900

    def showEvent(self, event) -> None:
        super().showEvent(event)
        # The window being on screen is our "UI ready" signal.
        if not self._loaded_once:
            self._loaded_once = True
            QTimer.singleShot(0, self.reload_dashboard)

    def reload_dashboard(self) -> None:
        if self.current_worker is not None and self.current_worker.isRunning():
            return

        self.reload_button.setEnabled(False)
        self.reload_button.setText("Loading...")
        self.info_label.setText("")
        for canvas in self.canvases.values():
            canvas.show_placeholder("Loading...")

        self.current_worker = DashboardWorker(self.config)
        self.current_worker.chart_ready.connect(self.on_chart_ready)
        self.current_worker.finished_with_result.connect(self.on_dashboard_finished)
        self.current_worker.start()

    def on_chart_ready(self, payload: ChartPayload) -> None:
        canvas = self.canvases.get(payload.config.key)
        if canvas is None:
            logger.error("No canvas for chart %s", payload.config.key)
            return
        canvas.plot_payload(payload)

    def on_dashboard_finished(self, result: DashboardResult) -> None:
        self.reload_button.setEnabled(True)
        self.reload_button.setText("Reload")

        # Failed charts keep an empty canvas; the details are in the log.
        for outcome in result.failed:
            canvas = self.canvases.get(outcome.key)
            if canvas is not None:
                canvas.show_placeholder("Could not load data")

        if result.failed:
            self.info_label.setText(
                f"{len(result.failed)} chart(s) could not be loaded. See the log for details."
            )

    def on_save_pdf_clicked(self) -> None:
        file_path, _ = QFileDialog.getSaveFileName(
            self, "Save summary PDF", "Streaming_Summary_Report.pdf", "PDF files (*.pdf)"
        )
        if not file_path:
            return

        self.pdf_button.setEnabled(False)
        self.current_pdf_worker = SummaryPdfWorker(self.config, file_path)
        self.current_pdf_worker.finished_with_result.connect(self.on_pdf_finished)
        self.current_pdf_worker.start()

    def on_pdf_finished(self, result: SaveResult) -> None:
        self.pdf_button.setEnabled(True)
        if not result.ok:
            self._show_error(result.error_message or "Could not download the summary.")
            return
        self.info_label.setText(f"Summary saved to {result.path}")

    def _show_error(self, message: str) -> None:
        self.info_label.setText(message)
        msg_box = QMessageBox(self)
        msg_box.setIcon(QMessageBox.Warning)
        msg_box.setWindowTitle("Error")
        msg_box.setText(message)
        msg_box.exec_()


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = QApplication(sys.argv)
    window = MainWindow()
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
