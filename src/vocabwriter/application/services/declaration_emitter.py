"""Declaration Emitter.

Renders one term as a ``term``/``property`` statement of the vocabulary
class body, with attributes sorted by key.
"""

from typing import Any, Mapping

from vocabwriter.domain.ruby_literals import inspect_symbol, is_bare_symbol
from vocabwriter.domain.vocabulary_models import VOCAB_KEY, TermBucket, as_attribute_value

from .attribute_serializer import serialize_attribute

DECLARATION_INDENT = "    "
ATTRIBUTE_SEPARATOR = ",\n      "


def render_key(key: str) -> str:
    """``key: `` for identifier keys, ``:"quoted" => `` otherwise."""
    if is_bare_symbol(key):
        return f"{key}: "
    return f"{inspect_symbol(key)} => "


def emit_declaration(name: str, attributes: Mapping[str, Any], bucket: TermBucket) -> str:
    """Render the declaration of term ``name`` in ``bucket``.

    Returns the statement text without a trailing newline.
    """
    components = [f"{DECLARATION_INDENT}{bucket.declarator} {inspect_symbol(name)}"]
    for key in sorted(attributes, key=str):
        if str(key) == VOCAB_KEY:
            continue
        value = as_attribute_value(attributes[key])
        components.append(render_key(str(key)) + serialize_attribute(value, str(key)))
    return ATTRIBUTE_SEPARATOR.join(components)
