"""Document rendering — LaTeX markup schema and the section state machine."""

from difftex.render.builder import BuilderState, DocumentBuilder, build_document
from difftex.render.latex import LatexMarkup, escape

__all__ = [
    "BuilderState",
    "DocumentBuilder",
    "LatexMarkup",
    "build_document",
    "escape",
]
