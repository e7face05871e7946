"""
Chart renderer: draws the rolling inventory window on a fixed-size canvas.
"""

from pathlib import Path
from typing import Sequence
import numpy as np
from matplotlib.figure import Figure
from matplotlib.backends.backend_agg import FigureCanvasAgg
import config


class ChartRenderer:
    """Full redraw of a line chart with a fixed vertical axis."""

    def __init__(
        self,
        width: int = config.CANVAS_WIDTH,
        height: int = config.CANVAS_HEIGHT,
        dpi: int = config.CANVAS_DPI,
        y_min: float = config.Y_AXIS_MIN,
        y_max: float = config.Y_AXIS_MAX,
        y_tick_interval: float = config.Y_TICK_INTERVAL,
        window: int = config.DISPLAY_WINDOW,
    ):
        """Initialize renderer.

        Args:
            width: Canvas width in pixels
            height: Canvas height in pixels
            dpi: Pixels per inch
            y_min: Bottom of the vertical axis
            y_max: Top of the vertical axis
            y_tick_interval: Spacing of the numeric axis labels
            window: Number of points the horizontal axis spans
        """
        self.y_min = y_min
        self.y_max = y_max
        self.y_ticks = np.arange(y_min, y_max + y_tick_interval / 2, y_tick_interval)
        self.window = window

        self.figure = Figure(figsize=(width / dpi, height / dpi), dpi=dpi)
        self.canvas = FigureCanvasAgg(self.figure)
        self.ax = self.figure.add_subplot(1, 1, 1)
        self.frames_rendered = 0
        self._draw_axes()

    def _draw_axes(self):
        self.ax.set_xlim(0, max(1, self.window - 1))
        self.ax.set_ylim(self.y_min, self.y_max)
        self.ax.set_yticks(self.y_ticks)
        self.ax.set_xticks([])
        self.ax.set_ylabel("Inventory (cars)")
        self.ax.grid(True, axis="y", alpha=0.3)

    def render(self, values: Sequence[float]):
        """Redraw the chart from scratch.

        Args:
            values: Retained inventory values, oldest first
        """
        self.ax.clear()
        self._draw_axes()
        if values:
            self.ax.plot(range(len(values)), list(values), color="tab:blue", linewidth=2)
        self.canvas.draw()
        self.frames_rendered += 1

    def plotted_values(self) -> list:
        """Return the y data of the line currently on the chart."""
        lines = self.ax.get_lines()
        if not lines:
            return []
        return [float(v) for v in lines[0].get_ydata()]

    def save(self, path: str) -> str:
        """Save the current frame as an image.

        Args:
            path: Output file path

        Returns:
            Path to saved figure
        """
        out = Path(path)
        out.parent.mkdir(parents=True, exist_ok=True)
        self.figure.savefig(out)
        return str(out)
