"""Ruby literal rendering.

Produces the text Ruby's ``inspect`` gives for the value types that appear in
vocabulary attributes, so generated declarations read back to equal values.
"""

import math
import re
from typing import Any, Mapping

_SYMBOL_NAME = re.compile(r"^[^\W\d]\w*[?!=]?$")

_CHAR_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
    "\f": "\\f",
    "\v": "\\v",
    "\b": "\\b",
    "\a": "\\a",
    "\x1b": "\\e",
}


def inspect_string(text: str) -> str:
    """Double-quoted Ruby string literal for ``text``."""
    out = ['"']
    for index, char in enumerate(text):
        if char in _CHAR_ESCAPES:
            out.append(_CHAR_ESCAPES[char])
        elif char == "#" and text[index + 1:index + 2] in ("{", "$", "@"):
            out.append("\\#")
        elif not char.isprintable():
            code = ord(char)
            out.append(f"\\u{code:04X}" if code <= 0xFFFF else f"\\u{{{code:X}}}")
        else:
            out.append(char)
    out.append('"')
    return "".join(out)


def is_bare_symbol(name: str) -> bool:
    """Whether ``name`` can be written as ``:name`` without quoting."""
    return bool(_SYMBOL_NAME.match(name))


def inspect_symbol(name: str) -> str:
    """Ruby symbol literal: ``:name`` or ``:"quoted name"``."""
    if is_bare_symbol(name):
        return f":{name}"
    return ":" + inspect_string(name)


def inspect_float(number: float) -> str:
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    text = repr(number)
    if "e" in text:
        mantissa, exponent = text.split("e")
        if "." not in mantissa:
            mantissa += ".0"
        sign = exponent[0] if exponent[0] in "+-" else "+"
        digits = exponent.lstrip("+-").rjust(2, "0")
        return f"{mantissa}e{sign}{digits}"
    return text


def inspect_value(value: Any) -> str:
    """Ruby ``inspect`` text for strings, numbers, booleans, nil and collections."""
    if value is None:
        return "nil"
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return inspect_float(value)
    if isinstance(value, str):
        return inspect_string(value)
    if isinstance(value, Mapping):
        if not value:
            return "{}"
        entries = ", ".join(f"{inspect_value(k)} => {inspect_value(v)}" for k, v in value.items())
        return "{" + entries + "}"
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(inspect_value(item) for item in value) + "]"
    return inspect_string(str(value))
