"""
  flisp Lexer

- Single pass over the characters with one line counter (1-based)
- '(' ')' and "'" are one token each
- newlines bump the line counter; NEWLINE tokens are only kept on request
- a digit, or a '+'/'-' sign, starts a number; a letter starts an identifier
- identifier text is classified by TokenKind.from_string, so keywords,
  booleans and null never need special scanning
"""

from __future__ import annotations

import logging

from flisp.errors import LexError
from flisp.types.token import Token, TokenKind

logger = logging.getLogger(__name__)

SINGLE_CHAR_TOKENS: dict[str, TokenKind] = {
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "'": TokenKind.QUOTE,
}


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def _is_ident_char(c: str) -> bool:
    return c.isalnum() or c == "_"


class Lexer:
    def __init__(self, source: str, keep_newlines: bool = False):
        self.source = source
        self.keep_newlines = keep_newlines
        self.pos = 0
        self.line = 1
        self.tokens: list[Token] = []

    def tokenize(self) -> list[Token]:
        src = self.source
        n = len(src)
        while self.pos < n:
            c = src[self.pos]

            if c == "\n":
                if self.keep_newlines:
                    self.tokens.append(Token(TokenKind.NEWLINE, "\n", self.line))
                self.line += 1
                self.pos += 1
                continue

            if c.isspace():
                self.pos += 1
                continue

            if c in SINGLE_CHAR_TOKENS:
                self.tokens.append(Token(SINGLE_CHAR_TOKENS[c], c, self.line))
                self.pos += 1
                continue

            if _is_digit(c) or c in "+-":
                self.tokens.append(self._scan_number())
                continue

            if c.isalpha():
                self.tokens.append(self._scan_identifier())
                continue

            raise LexError(f"Unexpected character {c!r}", self.line)

        logger.debug("Tokenized %d tokens over %d lines", len(self.tokens), self.line)
        return self.tokens

    def _scan_number(self) -> Token:
        src = self.source
        n = len(src)
        start = self.pos
        sign = ""
        if src[self.pos] in "+-":
            sign = src[self.pos]
            self.pos += 1
            if self.pos >= n or src[self.pos].isspace() or src[self.pos] in "()":
                # a bare sign is not a number
                return Token(TokenKind.from_string(sign), sign, self.line)
            if not _is_digit(src[self.pos]):
                raise LexError(
                    f"Invalid number literal {src[start:self.pos + 1]!r}", self.line
                )

        seen_dot = False
        while self.pos < n:
            c = src[self.pos]
            if _is_digit(c):
                self.pos += 1
            elif c == "." and not seen_dot:
                seen_dot = True
                self.pos += 1
            else:
                break

        if self.pos < n and (src[self.pos].isalpha() or src[self.pos] == "_"):
            raise LexError(
                f"Invalid number literal {src[start:self.pos + 1]!r}", self.line
            )

        digits = src[start + len(sign):self.pos]
        # '+' only marks the sign; '-' is part of the literal text
        text = digits if sign == "+" else sign + digits
        kind = TokenKind.from_string(text)
        if kind not in (TokenKind.INTEGER, TokenKind.REAL):
            raise LexError(f"Malformed number literal {text!r}", self.line)
        return Token(kind, text, self.line)

    def _scan_identifier(self) -> Token:
        src = self.source
        start = self.pos
        while self.pos < len(src) and _is_ident_char(src[self.pos]):
            self.pos += 1
        text = src[start:self.pos]
        return Token(TokenKind.from_string(text), text, self.line)


def tokenize(source: str, keep_newlines: bool = False) -> list[Token]:
    """Turn source text into a token list; raises LexError on bad input."""
    return Lexer(source, keep_newlines).tokenize()
