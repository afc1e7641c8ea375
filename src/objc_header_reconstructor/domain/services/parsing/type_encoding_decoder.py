#!/usr/bin/env python3

"""Decoding of runtime type encodings into C declarations.

Used to render ivar declarations, whose types are only available in the
compact runtime form (``q``, ``^{CGRect=...}``, ``@"NSString"``).
"""

from ....infrastructure.logging import get_logger

logger = get_logger(__name__)

SIMPLE_TYPES = {
    "c": "char",
    "i": "int",
    "s": "short",
    "l": "long",
    "q": "long long",
    "C": "unsigned char",
    "I": "unsigned int",
    "S": "unsigned short",
    "L": "unsigned long",
    "Q": "unsigned long long",
    "f": "float",
    "d": "double",
    "D": "long double",
    "B": "BOOL",
    "v": "void",
    "*": "char *",
    "#": "Class",
    ":": "SEL",
    "?": "void /* unknown */",
}

QUALIFIERS = {
    "r": "const",
    "n": "in",
    "N": "inout",
    "o": "out",
    "O": "bycopy",
    "R": "byref",
    "V": "oneway",
    "A": "_Atomic",
}

_CLOSERS = {"{": "}", "(": ")", "[": "]"}


def _pointer(base: str) -> str:
    return base + "*" if base.endswith("*") else base + " *"


class _Decoder:
    """Recursive-descent decoder over one encoding string."""

    def __init__(self, encoding: str):
        self.encoding = encoding
        self.pos = 0

    def _peek(self) -> str:
        return self.encoding[self.pos] if self.pos < len(self.encoding) else ""

    def _skip_aggregate(self, opener: str) -> None:
        depth = 0
        while self.pos < len(self.encoding):
            char = self.encoding[self.pos]
            self.pos += 1
            if char == '"':
                end = self.encoding.find('"', self.pos)
                self.pos = len(self.encoding) if end == -1 else end + 1
            elif char == opener:
                depth += 1
            elif char == _CLOSERS[opener]:
                depth -= 1
                if depth == 0:
                    return

    def _read_digits(self) -> str:
        start = self.pos
        while self._peek().isdigit():
            self.pos += 1
        return self.encoding[start : self.pos]

    def decode(self) -> tuple[str, str]:
        """Decode one type, returning ``(type, declarator_suffix)``."""
        char = self._peek()
        if not char:
            return "void", ""

        if char in QUALIFIERS:
            self.pos += 1
            base, suffix = self.decode()
            return f"{QUALIFIERS[char]} {base}", suffix

        if char == "@":
            return self._decode_object(), ""

        if char == "^":
            self.pos += 1
            base, suffix = self.decode()
            return _pointer(base), suffix

        if char in "{(":
            return self._decode_aggregate(char), ""

        if char == "[":
            self.pos += 1
            count = self._read_digits()
            base, suffix = self.decode()
            if self._peek() == "]":
                self.pos += 1
            return base, f"[{count}]{suffix}"

        if char == "b":
            self.pos += 1
            return "unsigned int", f" : {self._read_digits()}"

        self.pos += 1
        if char in SIMPLE_TYPES:
            return SIMPLE_TYPES[char], ""

        logger.debug(f"Unknown type encoding character {char!r} in {self.encoding!r}")
        return f"void /* {char} */", ""

    def _decode_object(self) -> str:
        self.pos += 1
        following = self._peek()
        if following == "?":
            self.pos += 1
            return "id /* block */"
        if following != '"':
            return "id"

        end = self.encoding.find('"', self.pos + 1)
        if end == -1:
            end = len(self.encoding)
        name = self.encoding[self.pos + 1 : end]
        self.pos = end + 1
        if not name:
            return "id"
        if name.startswith("<"):
            return f"id{name}"
        return _pointer(name)

    def _decode_aggregate(self, opener: str) -> str:
        start = self.pos
        self._skip_aggregate(opener)
        body = self.encoding[start + 1 : self.pos - 1]
        name = body.split("=", 1)[0]
        keyword = "struct" if opener == "{" else "union"
        if not name or name == "?":
            return f"{keyword} {{ /* anonymous */ }}"
        return f"{keyword} {name}"


def decode_type_encoding(encoding: str) -> str:
    """Decode a runtime type encoding into a C type.

    Examples:
        - ``q``: ``long long``
        - ``@"NSString"``: ``NSString *``
        - ``^{CGPoint=dd}``: ``struct CGPoint *``
    """
    base, suffix = _Decoder(encoding).decode()
    return base + suffix


def format_ivar_declaration(encoding: str, name: str) -> str:
    """Render ``encoding`` as a C declarator for ``name`` (without ``;``)."""
    base, suffix = _Decoder(encoding).decode()
    separator = "" if base.endswith("*") else " "
    return f"{base}{separator}{name}{suffix}"
