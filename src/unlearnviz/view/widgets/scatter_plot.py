"""Scatter chart of the two point series with the linear decision boundary."""
from __future__ import annotations

import logging
from typing import Container, TYPE_CHECKING

import numpy as np
import pyqtgraph as pg
from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QWidget, QVBoxLayout

from unlearnviz import config
from unlearnviz.model.classifier import Label

if TYPE_CHECKING:
    import numpy.typing as npt
    from unlearnviz.model.projection import ChartProjection


logger = logging.getLogger(__name__)


class ScatterPlot(QWidget):
    """
    PyQtGraph scatter plot with:
      - one series per label, coloured like the legend,
      - the decision boundary x + y = 0 as a dashed line,
      - a thicker outline around selected points,
      - click-to-select: clicking a point emits its store index.
    """

    # Emitted with the store index of the clicked point
    point_clicked = Signal(int)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.plot_widget = pg.PlotWidget()
        self.plot_widget.showGrid(x=True, y=True, alpha=0.3)
        self.plot_widget.setTitle(config.CHART_TITLE, color='black', size='12pt')
        self.plot_widget.setLabel('bottom', config.X_AXIS_TITLE, color='black')
        self.plot_widget.setLabel('left', config.Y_AXIS_TITLE, color='black')
        self.plot_widget.setAspectLocked(True)
        self.plot_widget.addLegend(offset=(10, 10))
        layout.addWidget(self.plot_widget)

        self.boundary = pg.InfiniteLine(
            pos=(0.0, 0.0),
            angle=-45,
            movable=False,
            pen=pg.mkPen(color=config.BOUNDARY_COLOR, width=1, style=Qt.DashLine),
            label='x + y = 0',
            labelOpts={'position': 0.9, 'color': config.BOUNDARY_COLOR},
        )
        self.plot_widget.addItem(self.boundary)

        self.series: dict[Label, pg.ScatterPlotItem] = {}
        for label, color in ((Label.POSITIVE, config.POSITIVE_COLOR), (Label.NEGATIVE, config.NEGATIVE_COLOR)):
            item = pg.ScatterPlotItem(
                name=str(label),
                size=config.SYMBOL_SIZE,
                symbol='o',
                brush=pg.mkBrush(*color),
                pen=pg.mkPen(None),
                hoverable=True,
            )
            item.sigClicked.connect(self._on_points_clicked)
            self.plot_widget.addItem(item)
            self.series[label] = item

        self.plot_widget.setXRange(config.COORD_MIN, config.COORD_MAX)
        self.plot_widget.setYRange(config.COORD_MIN, config.COORD_MAX)

    def set_projection(self, projection: ChartProjection, selected: Container[int] = ()) -> None:
        """Replace both series with the given projection."""
        for label, item in self.series.items():
            xy, indices = projection.series(label)
            self._set_series(item, label, xy, indices, selected)

    def _set_series(
        self,
        item: pg.ScatterPlotItem,
        label: Label,
        xy: npt.NDArray[np.float64],
        indices: npt.NDArray[np.int64],
        selected: Container[int],
    ) -> None:
        color = config.POSITIVE_COLOR if label is Label.POSITIVE else config.NEGATIVE_COLOR
        selected_pen = pg.mkPen(config.SELECTED_PEN_COLOR, width=config.SELECTED_PEN_WIDTH)
        plain_pen = pg.mkPen(color[:3], width=1)
        pens = [selected_pen if int(i) in selected else plain_pen for i in indices]

        item.setData(
            x=xy[:, 0],
            y=xy[:, 1],
            data=[int(i) for i in indices],
            pen=pens,
            brush=pg.mkBrush(*color),
        )

    def _on_points_clicked(self, _item: pg.ScatterPlotItem, points, *_args) -> None:
        """Toggle the first point under the cursor."""
        if len(points) == 0:
            return
        index = points[0].data()
        logger.debug(f"Chart click on point {index}.")
        self.point_clicked.emit(int(index))
