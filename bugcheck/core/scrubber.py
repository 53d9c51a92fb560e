"""
Comment and string scrubbing.

Produces a "code-only" view of source text: the contents of string literals
and comments are blanked with spaces so token searches cannot match inside
them. Output length always equals input length and newlines survive, so
offsets and line numbers computed on the scrubbed text are valid for the raw
text too.
"""

QUOTES = frozenset("\"'`")

_CODE = 0
_STRING = 1
_LINE_COMMENT = 2
_BLOCK_COMMENT = 3


def scrub(text: str) -> str:
    """Blank string and comment contents, preserving length and newlines.

    Handles single, double and backtick quoted strings with backslash
    escapes, ``//`` and ``#`` line comments, and ``/* ... */`` block comments.
    Language specific string prefixes (raw strings, f-strings) are not
    recognized.
    """
    return _scan(text)[0]


def comment_starts(text: str) -> list[int]:
    """Offsets at which each line or block comment opens, in order."""
    return _scan(text)[1]


def _scan(text: str) -> tuple[str, list[int]]:
    out: list[str] = []
    starts: list[int] = []
    mode = _CODE
    quote = ""
    escaped = False
    i = 0
    n = len(text)

    while i < n:
        char = text[i]
        nxt = text[i + 1] if i + 1 < n else ""

        if char == "\n":
            out.append(char)
            if mode == _LINE_COMMENT:
                mode = _CODE
            escaped = False
            i += 1
            continue

        if mode == _BLOCK_COMMENT:
            if char == "*" and nxt == "/":
                out.append("  ")
                mode = _CODE
                i += 2
                continue
            out.append(" ")
        elif mode == _LINE_COMMENT:
            out.append(" ")
        elif mode == _STRING:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == quote:
                mode = _CODE
            out.append(" ")
        elif char in QUOTES:
            mode = _STRING
            quote = char
            out.append(" ")
        elif char == "/" and nxt == "/":
            mode = _LINE_COMMENT
            starts.append(i)
            out.append("  ")
            i += 2
            continue
        elif char == "/" and nxt == "*":
            mode = _BLOCK_COMMENT
            starts.append(i)
            out.append("  ")
            i += 2
            continue
        elif char == "#":
            mode = _LINE_COMMENT
            starts.append(i)
            out.append(" ")
        else:
            out.append(char)
        i += 1

    return "".join(out), starts
