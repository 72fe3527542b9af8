"""
The VIEW layer: Qt widgets and the pyqtgraph chart.
It reads from the model and sends user actions to the Store.
"""
