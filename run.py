"""
Development launcher for unlearnviz.

Runs the app straight from a source checkout: puts ``src/`` on the import path
so ``import unlearnviz`` works without ``pip install -e .``. Arguments are passed
through to the normal command line, e.g.

    $ python run.py --seed 42 --log-level DEBUG
"""
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src'))

from unlearnviz.main import main

if __name__ == "__main__":
    sys.exit(main())
