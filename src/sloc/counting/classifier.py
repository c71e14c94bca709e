"""Whole-line classification into blank, comment and code."""

from __future__ import annotations

from .models import ClassifierState, LineKind


class LineClassifier:
    """Classify physical lines given one line-comment and one block-comment pair.

    Block comments are tracked one level deep and only whole lines are
    classified; code followed by a trailing comment counts as code.
    """

    def __init__(
        self,
        line_comment: str = "//",
        block_open: str = "/*",
        block_close: str = "*/",
    ) -> None:
        self.line_comment = line_comment
        self.block_open = block_open
        self.block_close = block_close

    def classify(
        self, line: str, state: ClassifierState
    ) -> tuple[LineKind, ClassifierState]:
        """Classify ``line`` and return its kind plus the state for the next line."""
        line = line.strip()

        if not line:
            return LineKind.BLANK, state

        if state.in_block_comment:
            if line.endswith(self.block_close):
                return LineKind.COMMENT, ClassifierState(in_block_comment=False)
            return LineKind.COMMENT, state

        # Line comments win over block openers: "// not /* a block */"
        if line.startswith(self.line_comment):
            return LineKind.COMMENT, state

        if line.startswith(self.block_open):
            if not line.endswith(self.block_close):
                return LineKind.COMMENT, ClassifierState(in_block_comment=True)
            return LineKind.COMMENT, state

        return LineKind.CODE, state
