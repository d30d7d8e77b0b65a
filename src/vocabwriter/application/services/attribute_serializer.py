"""Attribute Serializer.

Renders attribute values as frozen Ruby literals. Free text (``comment``
and namespaced keys such as ``dc:description``) uses the ``%(...)``
form with parentheses escaped; everything else uses Ruby ``inspect``.
"""

from typing import Any

from vocabwriter.domain.ruby_literals import inspect_value
from vocabwriter.domain.vocabulary_models import AttributeValue, Scalar, ValueList

COMMENT_KEY = "comment"
ESCAPE_MARKER = "\\"


def is_text_key(key: str) -> bool:
    """Whether values under ``key`` are written as long-form text."""
    return key == COMMENT_KEY or ":" in key


def escape_text(text: str) -> str:
    return text.replace("(", ESCAPE_MARKER + "(").replace(")", ESCAPE_MARKER + ")")


def unescape_text(text: str) -> str:
    """Reverse ``escape_text``."""
    return text.replace(ESCAPE_MARKER + "(", "(").replace(ESCAPE_MARKER + ")", ")")


def serialize_value(value: Any, key: str) -> str:
    """Serialize one value held under ``key``."""
    if is_text_key(str(key)):
        if not isinstance(value, str):
            return f"{inspect_value(value)}.freeze"
        return f"%({escape_text(value)}).freeze"
    return f"{inspect_value(value)}.freeze"


def serialize_attribute(value: AttributeValue, key: str) -> str:
    """Serialize a whole attribute.

    Lists are serialized element by element and sorted on the rendered
    text. A single-element list renders like its bare element.
    """
    if isinstance(value, Scalar):
        items = [value.value]
    elif isinstance(value, ValueList):
        items = list(value.values)
    else:
        items = list(value) if isinstance(value, (list, tuple)) else [value]

    if len(items) == 1:
        return serialize_value(items[0], key)
    return "[" + ", ".join(sorted(serialize_value(item, key) for item in items)) + "]"
