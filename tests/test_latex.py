"""Tests for LaTeX escaping and the markup schema."""

from difftex.git.models import LineKind, Mode
from difftex.render.latex import (
    BLOCK_CLOSE,
    BLOCK_OPEN,
    DEFAULT_TITLES,
    LINE_STYLES,
    LatexMarkup,
    escape,
)


class TestEscape:
    def test_plain_text_unchanged(self):
        assert escape("plain text 123 (ok)") == "plain text 123 (ok)"

    def test_no_double_escaping(self):
        assert escape("100% {a_b}\\c") == r"100\% \{a\_b\}\textbackslash{}c"

    def test_all_specials(self):
        assert escape("$&#~^") == r"\$\&\#\textasciitilde{}\textasciicircum{}"

    def test_backslash_replacement_braces_kept(self):
        assert escape("\\\\") == r"\textbackslash{}\textbackslash{}"


class TestMarkup:
    def test_styled_lines(self):
        markup = LatexMarkup()
        assert markup.line("+x_y", LineKind.ADDITION) == "\\textcolor{diffadd}{+x\\_y}\n"
        assert markup.line("-x", LineKind.DELETION) == "\\textcolor{diffrem}{-x}\n"
        assert markup.line("@@ -1 +1 @@", LineKind.HUNK_MARKER) == "\\textcolor{diffinfo}{@@ -1 +1 @@}\n"

    def test_context_unstyled(self):
        assert LatexMarkup().line(" same", LineKind.CONTEXT) == " same\n"

    def test_every_kind_has_a_style_entry(self):
        assert set(LINE_STYLES) == set(LineKind)
        assert LINE_STYLES[LineKind.COMMIT_HEADER] == LINE_STYLES[LineKind.AUTHOR_OR_DATE]
        assert LINE_STYLES[LineKind.FILE_DIFF_HEADER] == LINE_STYLES[LineKind.FILE_HEADER_PATH]

    def test_headings(self):
        markup = LatexMarkup()
        assert markup.heading(1, "my_file.py") == "\\section{my\\_file.py}\n\n"
        assert markup.heading(2, "a.py") == "\\subsection{a.py}\n\n"

    def test_block_markers(self):
        assert BLOCK_OPEN == "\\begin{Verbatim}[commandchars=\\\\\\{\\},codes={\\catcode`$=3}]\n"
        assert BLOCK_CLOSE.startswith("\\end{Verbatim}")

    def test_preamble(self):
        preamble = LatexMarkup().preamble(DEFAULT_TITLES[Mode.DIFF], "Me & You")
        assert preamble.startswith("\\documentclass[11pt,a4paper]{article}")
        assert "\\title{Git Diff Output}" in preamble
        assert "\\author{Me \\& You}" in preamble
        assert "\\tableofcontents" in preamble
        assert "\\definecolor{diffcommit}" in preamble
        assert "Verbatim" not in preamble
