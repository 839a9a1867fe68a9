"""LaTeX output schema — escape table, style table, and document markers."""

from __future__ import annotations

import re
from string import Template
from typing import Dict, Optional

from difftex.git.models import LineKind, Mode

# Backslash first: replacements introduce backslashes and braces that must
# never be escaped again. Substitution is single-pass over the input.
LATEX_ESCAPES: Dict[str, str] = {
    "\\": r"\textbackslash{}",
    "{": r"\{",
    "}": r"\}",
    "$": r"\$",
    "&": r"\&",
    "%": r"\%",
    "#": r"\#",
    "_": r"\_",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
}

_ESCAPE_RE = re.compile("|".join(re.escape(ch) for ch in LATEX_ESCAPES))

LINE_STYLES: Dict[LineKind, Optional[str]] = {
    LineKind.COMMIT_HEADER: "diffcommit",
    LineKind.AUTHOR_OR_DATE: "diffcommit",
    LineKind.FILE_DIFF_HEADER: "difffile",
    LineKind.FILE_HEADER_PATH: "difffile",
    LineKind.HUNK_MARKER: "diffinfo",
    LineKind.ADDITION: "diffadd",
    LineKind.DELETION: "diffrem",
    LineKind.CONTEXT: None,
}

DEFAULT_TITLES: Dict[Mode, str] = {
    Mode.DIFF: "Git Diff Output",
    Mode.LOG: "Git Log Output",
}
DEFAULT_AUTHOR = "Generated from Git Repository"

_PREAMBLE = Template(r"""\documentclass[11pt,a4paper]{article}
\usepackage[utf8]{inputenc}
\usepackage[T1]{fontenc}
\usepackage{listings}
\usepackage{xcolor}
\usepackage{fancyvrb}
\usepackage[margin=1in]{geometry}
\usepackage{hyperref}

% Define colors for diff output
\definecolor{diffadd}{RGB}{0,128,0}
\definecolor{diffrem}{RGB}{128,0,0}
\definecolor{diffinfo}{RGB}{0,0,128}
\definecolor{difffile}{RGB}{128,0,128}
\definecolor{diffcommit}{RGB}{184,134,11}

% Custom listing style for diffs
\lstdefinestyle{diffstyle}{
    basicstyle=\ttfamily\small,
    breaklines=true,
    columns=fullflexible,
    keepspaces=true,
    showspaces=false,
    showstringspaces=false,
    breakatwhitespace=false,
    tabsize=4,
}

\title{$title}
\author{$author}
\date{\today}

\begin{document}
\maketitle
\tableofcontents
\newpage
""")

BLOCK_OPEN = "\\begin{Verbatim}[commandchars=\\\\\\{\\},codes={\\catcode`$=3}]\n"
BLOCK_CLOSE = "\\end{Verbatim}\n\n"
PAGE_BREAK = "\\newpage\n"
TERMINATOR = "\\end{document}\n"

_HEADINGS = {1: "section", 2: "subsection"}


def escape(text: str) -> str:
    """Escape every LaTeX special character in *text* in a single pass."""
    return _ESCAPE_RE.sub(lambda m: LATEX_ESCAPES[m.group(0)], text)


class LatexMarkup:
    """Markup emitter for the fixed LaTeX document schema.

    The builder only talks to this object, so another schema can be
    substituted by providing the same methods.
    """

    block_open_marker = BLOCK_OPEN
    block_close_marker = BLOCK_CLOSE

    def preamble(self, title: str, author: str) -> str:
        return _PREAMBLE.substitute(title=escape(title), author=escape(author))

    def heading(self, level: int, label: str) -> str:
        command = _HEADINGS.get(level, "subsubsection")
        return f"\\{command}{{{escape(label)}}}\n\n"

    def block_open(self) -> str:
        return self.block_open_marker

    def block_close(self) -> str:
        return self.block_close_marker

    def page_break(self) -> str:
        return PAGE_BREAK

    def terminator(self) -> str:
        return TERMINATOR

    def line(self, raw: str, kind: LineKind) -> str:
        """Return *raw* escaped and wrapped in the style for *kind*."""
        style = LINE_STYLES.get(kind)
        text = escape(raw)
        if style is None:
            return text + "\n"
        return f"\\textcolor{{{style}}}{{{text}}}\n"
