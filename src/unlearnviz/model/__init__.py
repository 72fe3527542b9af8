"""
The MODEL layer contains pure data structures and business logic.
It has NO knowledge of the GUI (Qt) or the plotting library (pyqtgraph).
It deals with points, selection, the classifier rule and derived views.
"""
from unlearnviz.model.classifier import Label, classify, classify_many
from unlearnviz.model.metrics import accuracy, format_accuracy
from unlearnviz.model.points import DataPoint, PointStore, random_point
from unlearnviz.model.projection import ChartProjection, project
from unlearnviz.model.selection import SelectionSet
from unlearnviz.model.state import ViewState, VisualizationState

__all__ = [
    'Label', 'classify', 'classify_many',
    'accuracy', 'format_accuracy',
    'DataPoint', 'PointStore', 'random_point',
    'ChartProjection', 'project',
    'SelectionSet',
    'ViewState', 'VisualizationState',
]
