"""String helpers used while parsing DBC text and generating C sources."""

from __future__ import annotations

_TYPE_NAMES = (
    "int8_t",
    "int16_t",
    "int32_t",
    "int64_t",
    "uint8_t",
    "uint16_t",
    "uint32_t",
    "uint64_t",
)

_ASCII_LOWER = "abcdefghijklmnopqrstuvwxyz"
_ASCII_UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_TO_UPPER = str.maketrans(_ASCII_LOWER, _ASCII_UPPER)
_TO_LOWER = str.maketrans(_ASCII_UPPER, _ASCII_LOWER)


def indented_string(n: int, source: str, c: str = " ") -> str:
    """Pad *source* on the right with *c* up to a total length of *n*."""
    if len(source) >= n:
        return source
    return source + c * (n - len(source))


def print_type(tid: int) -> str:
    """Return the C integer type name for a type id, or an empty string."""
    if 0 <= tid < len(_TYPE_NAMES):
        return _TYPE_NAMES[tid]
    return ""


def str_toupper(s: str) -> str:
    """Upper-case the ASCII letters of *s*."""
    return s.translate(_TO_UPPER)


def str_tolower(s: str) -> str:
    """Lower-case the ASCII letters of *s*."""
    return s.translate(_TO_LOWER)


def str_trim(s: str) -> str:
    """Drop trailing whitespace and control characters.

    An empty string comes back as a single newline.
    """
    if not s:
        return "\n"
    end = len(s)
    while end > 0 and s[end - 1] <= " ":
        end -= 1
    return s[:end]


def _is_first_valid(c: str) -> bool:
    return ("a" <= c <= "z") or ("A" <= c <= "Z") or c == "_"


def _is_nonfirst_valid(c: str) -> bool:
    return _is_first_valid(c) or ("0" <= c <= "9")


def make_c_name(s: str) -> str:
    """Make a valid C identifier out of *s*; spaces become underscores."""
    parts: list[str] = []
    for ch in s:
        if (not parts and _is_first_valid(ch)) or (parts and _is_nonfirst_valid(ch)):
            parts.append(ch)
        elif ch == " ":
            parts.append("_")
    return "".join(parts)


def prt_double(value: float, precision: int, usedot: bool = True) -> str:
    """Format *value* in fixed notation, dropping trailing zeros.

    At most *precision* digits are kept after the dot. With *usedot* a whole
    number is printed with a trailing ``.0``.
    """
    s = "%.10f" % value
    dotpos = s.find(".")
    if dotpos < 0:
        return s + ".0" if usedot else s

    tail = s[dotpos + 1 : dotpos + 1 + precision]
    addtail = 0
    for j, ch in enumerate(tail, start=1):
        if "0" < ch <= "9":
            addtail = j

    if addtail == 0:
        s = s[:dotpos]
        return s + ".0" if usedot else s
    return s[: dotpos + addtail + 1]