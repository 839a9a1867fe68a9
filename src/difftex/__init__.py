"""difftex — render git diffs and commit logs as colour-coded LaTeX."""

__version__ = "0.1.0"
