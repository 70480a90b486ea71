"""
Entry point for running PrettyTerm as a Python module: `python -m prettyterm`

The console script declared in pyproject.toml calls `prettyterm.main:main`
directly; both paths run the same function.
"""

import sys

from .main import main

if __name__ == "__main__":
    sys.exit(main())
