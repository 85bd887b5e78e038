from __future__ import annotations

from .common import BasicSyntaxError

# Longest prefix first so "<=" is not read as "<" followed by "=".
RELATIONAL_OPERATORS = ("<=", "<>", "<", "=", ">=", ">")


class ScannerMixin:
    """
    Matchers over `self.text` starting at `self.cursor`.

    Every `match_*` method returns True and leaves the matched text in
    `self.token` on success. On failure the cursor is left after any skipped
    whitespace, except for `match_keyword`, which restores it completely.
    """

    text: str = ""
    cursor: int = 0
    token: str = ""

    def load_text(self, text: str) -> None:
        self.text = text
        self.cursor = 0
        self.token = ""

    def rest(self) -> str:
        return self.text[self.cursor :]

    # ----- character classes -----

    def _at(self, predicate) -> bool:
        return self.cursor < len(self.text) and predicate(self.text[self.cursor])

    def skip_whitespace(self) -> None:
        while self._at(str.isspace):
            self.cursor += 1

    def skip_digits(self) -> None:
        while self._at(str.isdecimal):
            self.cursor += 1

    def at_eol(self) -> bool:
        self.skip_whitespace()
        return self.cursor >= len(self.text)

    # ----- tokens -----

    def match_word(self) -> bool:
        """A run of letters, lowercased. Does not skip leading whitespace."""
        if not self._at(str.isalpha):
            return False
        mark = self.cursor
        while self._at(str.isalpha):
            self.cursor += 1
        self.token = self.text[mark : self.cursor].lower()
        return True

    def match_identifier(self) -> bool:
        self.skip_whitespace()
        if not self._at(str.isalpha):
            return False
        mark = self.cursor
        while self._at(str.isalnum):
            self.cursor += 1
        self.token = self.text[mark : self.cursor].lower()
        return True

    def match_number(self) -> bool:
        self.skip_whitespace()
        mark = self.cursor
        self.skip_digits()
        if mark == self.cursor:
            return False
        if self._at(lambda ch: ch == "."):
            self.cursor += 1
            self.skip_digits()
        self.token = self.text[mark : self.cursor]
        return True

    def match_line_number(self) -> int | None:
        """A bare digit run as an integer line label, or None."""
        self.skip_whitespace()
        mark = self.cursor
        self.skip_digits()
        if mark == self.cursor:
            return None
        try:
            return int(self.text[mark : self.cursor])
        except ValueError:
            raise BasicSyntaxError("Line # too large") from None

    def match_string(self) -> bool:
        """A double-quoted literal; the token holds the text without quotes."""
        self.skip_whitespace()
        if not self._at(lambda ch: ch == '"'):
            return False
        end = self.text.find('"', self.cursor + 1)
        if end < 0:
            self.cursor = len(self.text)
            raise BasicSyntaxError("Unclosed string")
        self.token = self.text[self.cursor + 1 : end]
        self.cursor = end + 1
        return True

    def match_relation(self) -> bool:
        self.skip_whitespace()
        for op in RELATIONAL_OPERATORS:
            if self.text.startswith(op, self.cursor):
                self.token = op
                self.cursor += len(op)
                return True
        return False

    def match(self, literal: str) -> bool:
        self.skip_whitespace()
        if self.text.startswith(literal, self.cursor):
            self.token = literal
            self.cursor += len(literal)
            return True
        return False

    def match_any(self, *literals: str) -> bool:
        return any(self.match(literal) for literal in literals)

    def match_keyword(self, keyword: str) -> bool:
        mark = self.cursor
        self.skip_whitespace()
        if self.match_word() and self.token == keyword.lower():
            return True
        self.cursor = mark
        return False

    # ----- expectations -----

    def expect(self, literal: str) -> None:
        if not self.match(literal):
            raise BasicSyntaxError(f"'{literal}' expected, found: {self.rest()}")

    def expect_identifier(self) -> str:
        if not self.match_identifier():
            raise BasicSyntaxError(f"Variable expected near {self.rest()}")
        return self.token
