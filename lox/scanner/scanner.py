from string import ascii_letters, digits
from types import MappingProxyType
from typing import List, Mapping

from lox.error.communicator import ErrorRaiser
from lox.token import Token
from lox.type import Type
from lox.util import Span

from lox.error.scanner_error import (  # isort:skip
    UnexpectedCharacterError,
    UnterminatedStringError,
)

# Reserved words, mapped from their text to their token type.
# The `or` keyword is an alias of `||`.
KEYWORDS: Mapping[str, Type] = MappingProxyType(
    {
        "else": Type.ELSE,
        "false": Type.FALSE,
        "for": Type.FOR,
        "fun": Type.FUN,
        "if": Type.IF,
        "null": Type.NULL,
        "or": Type.OR,
        "print": Type.PRINT,
        "return": Type.RETURN,
        "super": Type.SUPER,
        "this": Type.THIS,
        "true": Type.TRUE,
        "var": Type.VAR,
        "while": Type.WHILE,
    }
)

SINGLE_CHARACTER_TOKENS = {
    "(": Type.LEFT_PAREN,
    ")": Type.RIGHT_PAREN,
    "{": Type.LEFT_BRACE,
    "}": Type.RIGHT_BRACE,
    ",": Type.COMMA,
    ".": Type.DOT,
    "-": Type.MINUS,
    "+": Type.PLUS,
    ";": Type.SEMICOLON,
    "*": Type.STAR,
    "?": Type.QUESTION,
    ":": Type.COLON,
}

# Characters that become a different token when directly followed by `=`
EQUAL_SUFFIXED_TOKENS = {
    "!": (Type.BANG, Type.BANG_EQUAL),
    "=": (Type.EQUAL, Type.EQUAL_EQUAL),
    ">": (Type.GREATER, Type.GREATER_EQUAL),
    "<": (Type.LESS, Type.LESS_EQUAL),
}

# Characters that are only valid when doubled
DOUBLED_TOKENS = {
    "&": Type.AND,
    "|": Type.OR,
}

QUOTES = ('"', "`")

ESCAPES = {
    "n": "\n",
    "t": "\t",
    '"': '"',
    "\\": "\\",
}


def is_digit(char: str) -> bool:
    return char != "" and char in digits


def is_alpha(char: str) -> bool:
    return char != "" and (char in ascii_letters or char == "_")


def is_alpha_numeric(char: str) -> bool:
    return is_alpha(char) or is_digit(char)


class Scanner:
    def __init__(self, program: str, errors: ErrorRaiser = None) -> None:
        self.og_program = program
        self.errors = errors if errors is not None else ErrorRaiser()

        self.tokens: List[Token] = []
        # Bounds of the lexeme that is currently being scanned
        self.start = 0
        self.current = 0
        # 1-based line number, and the offset at which that line starts
        self.line = 1
        self.line_start = 0
        # Location of `start`, as the lexeme may span multiple lines
        self.start_line = 1
        self.start_col = 0

    def scan(self) -> List[Token]:
        """Extract the list of tokens from the program passed to `Scanner(program)`.

        Lexical errors do not stop the scan: they are added to `self.errors`, and the
        malformed text does not produce a token. The last token is always `Type.EOF`.

        Returns:
            List[Token]: A list of Token instances
        """
        while not self.is_at_end():
            self.start = self.current
            self.start_line = self.line
            self.start_col = self.current - self.line_start
            self.scan_token()

        self.start = self.current
        self.start_line = self.line
        self.start_col = self.current - self.line_start
        self.add_token(Type.EOF)
        return self.tokens

    def scan_token(self) -> None:
        char = self.advance()
        match char:
            case _ if char in SINGLE_CHARACTER_TOKENS:
                self.add_token(SINGLE_CHARACTER_TOKENS[char])

            case _ if char in EQUAL_SUFFIXED_TOKENS:
                single, double = EQUAL_SUFFIXED_TOKENS[char]
                self.add_token(double if self.match("=") else single)

            case _ if char in DOUBLED_TOKENS:
                if self.match(char):
                    self.add_token(DOUBLED_TOKENS[char])
                else:
                    self.errors.add(
                        UnexpectedCharacterError(self.og_program, self.span())
                    )

            case "/":
                if self.match("/"):
                    self.line_comment()
                elif self.match("*"):
                    self.block_comment()
                else:
                    self.add_token(Type.SLASH)

            case " " | "\r" | "\t":
                pass

            case "\n":
                self.newline()

            case _ if char in QUOTES:
                self.string(char)

            case _ if is_digit(char):
                self.number()

            case _ if is_alpha(char):
                self.identifier()

            case _:
                self.errors.add(
                    UnexpectedCharacterError(self.og_program, self.span())
                )

    def line_comment(self) -> None:
        # The newline itself is left for `scan_token`
        while self.peek() != "\n" and not self.is_at_end():
            self.advance()

    def block_comment(self) -> None:
        # An unclosed block comment runs until the end of the program
        while not self.is_at_end():
            char = self.advance()
            if char == "\n":
                self.newline()
            elif char == "*" and self.match("/"):
                return

    def string(self, quote: str) -> None:
        value = []
        while self.peek() != quote and not self.is_at_end():
            char = self.advance()
            if char == "\n":
                self.newline()
            elif char == "\\":
                if self.is_at_end():
                    break
                escaped = self.advance()
                if escaped == "\n":
                    self.newline()
                # Unknown escapes are copied without the backslash
                value.append(ESCAPES.get(escaped, escaped))
                continue
            value.append(char)

        if self.is_at_end():
            self.errors.add(UnterminatedStringError(self.og_program, self.span()))
            return

        # The closing quote
        self.advance()
        self.add_token(Type.STRING, "".join(value))

    def number(self) -> None:
        while is_digit(self.peek()):
            self.advance()

        # A fractional part needs at least one digit after the dot
        if self.peek() == "." and is_digit(self.peek(1)):
            self.advance()
            while is_digit(self.peek()):
                self.advance()

        self.add_token(Type.NUMBER, float(self.lexeme))

    def identifier(self) -> None:
        while is_alpha_numeric(self.peek()):
            self.advance()

        self.add_token(KEYWORDS.get(self.lexeme, Type.IDENTIFIER))

    def advance(self) -> str:
        char = self.og_program[self.current]
        self.current += 1
        return char

    def match(self, expected: str) -> bool:
        if self.is_at_end() or self.og_program[self.current] != expected:
            return False
        self.current += 1
        return True

    def peek(self, offset: int = 0) -> str:
        """Return the character `offset` places after the current one, or "" past the end."""
        if self.current + offset >= len(self.og_program):
            return ""
        return self.og_program[self.current + offset]

    def is_at_end(self) -> bool:
        return self.current >= len(self.og_program)

    def newline(self) -> None:
        self.line += 1
        self.line_start = self.current

    @property
    def lexeme(self) -> str:
        return self.og_program[self.start : self.current]

    def span(self) -> Span:
        return Span(
            (self.start_line, self.line),
            (self.start_col, self.current - self.line_start),
        )

    def add_token(self, type: Type, literal: object = None) -> None:
        self.tokens.append(Token(self.lexeme, type, literal, self.line, self.span()))
