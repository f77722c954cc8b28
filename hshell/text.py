"""String helpers used by the shell: tokenising, number parsing and formatting."""

from __future__ import annotations

__all__ = [
    "starts_with",
    "split_words",
    "atoi",
    "erratoi",
    "convert_number",
    "remove_comments",
]

INT_MAX = 2**31 - 1
_UINT32_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF
_UPPER_DIGITS = "0123456789ABCDEF"
_LOWER_DIGITS = "0123456789abcdef"


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def starts_with(haystack: str, needle: str) -> str | None:
    """Return the rest of ``haystack`` after ``needle``, or None if it does not start with it."""
    if haystack.startswith(needle):
        return haystack[len(needle):]
    return None


def split_words(text: str | None, delims: str | None = " ") -> list[str]:
    """Split ``text`` on any character of ``delims``; runs of delimiters are ignored."""
    if not text:
        return []
    if not delims:
        delims = " "
    words: list[str] = []
    current: list[str] = []
    for ch in text:
        if ch in delims:
            if current:
                words.append("".join(current))
                current = []
        else:
            current.append(ch)
    if current:
        words.append("".join(current))
    return words


def atoi(text: str) -> int:
    """Lenient integer parse: the first run of digits, negated once per '-' seen up to its end.

    Arithmetic wraps like a 32-bit integer. Returns 0 when there are no digits.
    """
    sign = 1
    seen_digit = False
    result = 0
    for ch in text:
        if ch == "-":
            sign = -sign
        if _is_digit(ch):
            seen_digit = True
            result = (result * 10 + int(ch)) & _UINT32_MASK
        elif seen_digit:
            break
    value = result if sign > 0 else (-result) & _UINT32_MASK
    return value - 2**32 if value > INT_MAX else value


def erratoi(text: str) -> int:
    """Strict non-negative integer parse with an optional leading '+'.

    Raises ValueError on any non-digit character or a value above INT_MAX.
    """
    digits = text[1:] if text.startswith("+") else text
    result = 0
    for ch in digits:
        if not _is_digit(ch):
            raise ValueError(f"invalid number: {text!r}")
        result = result * 10 + int(ch)
        if result > INT_MAX:
            raise ValueError(f"number out of range: {text!r}")
    return result


def convert_number(
    num: int, base: int = 10, lowercase: bool = False, unsigned: bool = False
) -> str:
    """Render ``num`` in ``base`` (2 to 16).

    Negative numbers get a '-' sign unless ``unsigned`` is set, in which case they are
    taken modulo 2**64.
    """
    if not 2 <= base <= 16:
        raise ValueError(f"unsupported base: {base}")
    sign = ""
    if unsigned:
        n = num & _ULONG_MASK
    elif num < 0:
        n = -num
        sign = "-"
    else:
        n = num
    digits = _LOWER_DIGITS if lowercase else _UPPER_DIGITS
    out: list[str] = []
    while True:
        n, rem = divmod(n, base)
        out.append(digits[rem])
        if n == 0:
            break
    return sign + "".join(reversed(out))


def remove_comments(line: str) -> str:
    """Cut ``line`` at the first '#' that begins the line or follows a space."""
    for index, ch in enumerate(line):
        if ch == "#" and (index == 0 or line[index - 1] == " "):
            return line[:index]
    return line