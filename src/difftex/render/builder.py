"""Document builder — the section-structuring state machine.

Consumes classified lines one at a time and emits markup. The open-section
stack is at most two deep (commit → file). Which action a line triggers
depends only on the current :class:`BuilderState` and the line's
:class:`LineKind`, looked up in ``TRANSITIONS``.

Every section opened is closed exactly once, innermost first, so each
block-open marker in the output has exactly one matching close marker.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

from difftex.git.classifier import DEFAULT_COMMIT_ID_WIDTH, classify, commit_id, file_path
from difftex.git.models import DocumentState, Line, LineKind, Mode, Section, SectionKind
from difftex.render.latex import DEFAULT_AUTHOR, DEFAULT_TITLES, LatexMarkup


class BuilderState(str, Enum):
    IDLE = "idle"
    COMMIT = "commit"
    FILE = "file"
    COMMIT_FILE = "commit_file"


class Action(str, Enum):
    OPEN_COMMIT = "open_commit"
    OPEN_FILE = "open_file"
    EMIT = "emit"
    SKIP = "skip"


def _build_transitions() -> Dict[Tuple[BuilderState, LineKind], Action]:
    table: Dict[Tuple[BuilderState, LineKind], Action] = {}
    for state in BuilderState:
        for kind in LineKind:
            if kind is LineKind.COMMIT_HEADER:
                action = Action.OPEN_COMMIT
            elif kind is LineKind.FILE_DIFF_HEADER:
                action = Action.OPEN_FILE
            elif state is BuilderState.IDLE:
                action = Action.SKIP
            else:
                action = Action.EMIT
            table[(state, kind)] = action
    return table


TRANSITIONS = _build_transitions()


class DocumentBuilder:
    """Build a document from diff or log lines.

    Usage::

        builder = DocumentBuilder(Mode.DIFF)
        builder.feed_text(diff_text)
        document = builder.finish()
    """

    def __init__(
        self,
        mode: Mode,
        markup: Optional[LatexMarkup] = None,
        *,
        commit_id_width: int = DEFAULT_COMMIT_ID_WIDTH,
        title: Optional[str] = None,
        author: Optional[str] = None,
    ) -> None:
        self.mode = mode
        self.markup = markup or LatexMarkup()
        self.commit_id_width = commit_id_width
        self.state = DocumentState()
        self._chunks: List[str] = [
            self.markup.preamble(title or DEFAULT_TITLES[mode], author or DEFAULT_AUTHOR)
        ]
        self._document: Optional[str] = None

    # ── state ────────────────────────────────────────────────────────────

    @property
    def builder_state(self) -> BuilderState:
        kinds = [s.kind for s in self.state.stack]
        if not kinds:
            return BuilderState.IDLE
        if kinds == [SectionKind.COMMIT]:
            return BuilderState.COMMIT
        if kinds == [SectionKind.FILE]:
            return BuilderState.FILE
        return BuilderState.COMMIT_FILE

    @property
    def file_heading_level(self) -> int:
        return 2 if self.mode is Mode.LOG else 1

    # ── input ────────────────────────────────────────────────────────────

    def feed(self, raw: str) -> None:
        """Classify one line and apply its transition."""
        if self._document is not None:
            raise RuntimeError("builder already finished")
        line = Line(raw=raw, kind=classify(raw, self.mode))
        action = TRANSITIONS[(self.builder_state, line.kind)]

        if action is Action.SKIP:
            return
        if action is Action.OPEN_COMMIT:
            self._open_commit(line)
        elif action is Action.OPEN_FILE:
            self._open_file(line)
        else:
            self._emit(line)

    def feed_lines(self, lines: Iterable[str]) -> None:
        for raw in lines:
            self.feed(raw)

    def feed_text(self, text: str) -> None:
        self.feed_lines(text.splitlines())

    def finish(self) -> str:
        """Close all open sections and return the finished document."""
        if self._document is None:
            while self.state.stack:
                self._close_top()
            self._chunks.append(self.markup.terminator())
            self._document = "".join(self._chunks)
        return self._document

    # ── transitions ──────────────────────────────────────────────────────

    def _open_commit(self, line: Line) -> None:
        had_commit = self.state.commit_count > 0
        while self.state.stack:
            self._close_top()
        if had_commit:
            self._chunks.append(self.markup.page_break())

        self.state.commit_count += 1
        short_id = commit_id(line.raw, self.commit_id_width)
        label = f"Commit {self.state.commit_count}"
        if short_id:
            label = f"{label}: {short_id}"
        self._open_section(Section(kind=SectionKind.COMMIT, label=label), level=1)
        self._emit(line)

    def _open_file(self, line: Line) -> None:
        if self.state.top is not None and self.state.top.kind is SectionKind.FILE:
            self._close_top()
        commit = self.state.top
        if commit is not None and commit.block_open:
            self._chunks.append(self.markup.block_close())
            commit.block_open = False

        path = file_path(line.raw)
        if path is not None:
            self.state.current_file = path
        label = self.state.current_file or ""

        self.state.file_count += 1
        self._open_section(Section(kind=SectionKind.FILE, label=label), level=self.file_heading_level)
        self._emit(line)

    def _open_section(self, section: Section, level: int) -> None:
        self._chunks.append(self.markup.heading(level, section.label))
        self._chunks.append(self.markup.block_open())
        section.block_open = True
        self.state.stack.append(section)

    def _close_top(self) -> None:
        section = self.state.stack.pop()
        if section.block_open:
            self._chunks.append(self.markup.block_close())
            section.block_open = False

    def _emit(self, line: Line) -> None:
        top = self.state.top
        if top is None or not top.block_open:
            return
        self.state.count(line.kind)
        self._chunks.append(self.markup.line(line.raw, line.kind))


def build_document(text: str, mode: Mode, **options) -> str:
    """Render *text* (diff or log output) into a complete document string."""
    builder = DocumentBuilder(mode, **options)
    builder.feed_text(text)
    return builder.finish()
