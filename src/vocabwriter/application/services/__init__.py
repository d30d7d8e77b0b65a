"""Generation pipeline services."""

from .term_classifier import classify
from .attribute_serializer import serialize_attribute, serialize_value, unescape_text
from .declaration_emitter import emit_declaration
from .vocabulary_generator import VocabularyGenerator, GenerationReport, WriterState

__all__ = [
    "classify",
    "serialize_attribute",
    "serialize_value",
    "unescape_text",
    "emit_declaration",
    "VocabularyGenerator",
    "GenerationReport",
    "WriterState",
]
