"""Vocabulary Term Models.

Value objects shared by the generation pipeline:
- TermBucket: the four classification buckets, in emission order
- Scalar / ValueList: tagged attribute values
- Term: a named vocabulary entity with its attribute map
- TypeResolution: explicit outcome of classifying a term
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union


# Bookkeeping key recording the owning vocabulary; never emitted.
VOCAB_KEY = "vocab"

TYPE_KEY = "type"


class TermBucket(str, Enum):
    """Classification bucket of a vocabulary term."""
    CLASS = "class"
    PROPERTY = "property"
    DATATYPE = "datatype"
    OTHER = "other"

    @property
    def section_title(self) -> str:
        """Title of the comment line opening this bucket's section."""
        return _SECTION_TITLES[self]

    @property
    def declarator(self) -> str:
        """DSL keyword used to declare terms of this bucket."""
        return "property" if self is TermBucket.PROPERTY else "term"


_SECTION_TITLES = {
    TermBucket.CLASS: "Class definitions",
    TermBucket.PROPERTY: "Property definitions",
    TermBucket.DATATYPE: "Datatype definitions",
    TermBucket.OTHER: "Extra definitions",
}

# Fixed emission and matching order.
BUCKET_ORDER: Tuple[TermBucket, ...] = (
    TermBucket.CLASS,
    TermBucket.PROPERTY,
    TermBucket.DATATYPE,
    TermBucket.OTHER,
)


@dataclass(frozen=True)
class Scalar:
    """A single attribute value (literal text, reference, or structured data)."""
    value: Any


@dataclass(frozen=True)
class ValueList:
    """An ordered sequence of attribute values."""
    values: Tuple[Any, ...] = ()

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self):
        return iter(self.values)


AttributeValue = Union[Scalar, ValueList]


def as_attribute_value(raw: Any) -> AttributeValue:
    """Wrap a raw Python value in its tagged attribute form."""
    if isinstance(raw, (Scalar, ValueList)):
        return raw
    if isinstance(raw, (list, tuple)):
        return ValueList(tuple(raw))
    return Scalar(raw)


def attribute_items(value: AttributeValue) -> List[Any]:
    """Return the plain values held by an attribute, as a list."""
    if isinstance(value, ValueList):
        return list(value.values)
    return [value.value]


@dataclass
class Term:
    """A named entity of a vocabulary.

    Identity is the full URI; ``name`` is the URI with the vocabulary base
    stripped.
    """
    uri: str
    name: str
    attributes: Dict[str, AttributeValue] = field(default_factory=dict)

    @property
    def declared_types(self) -> List[str]:
        """Type references as recorded (prefixed names or URIs)."""
        value = self.attributes.get(TYPE_KEY)
        if value is None:
            return []
        return [str(item) for item in attribute_items(value)]

    def visible_attributes(self) -> Dict[str, AttributeValue]:
        """Attributes without the internal bookkeeping entry."""
        return {key: value for key, value in self.attributes.items() if key != VOCAB_KEY}

    def __lt__(self, other: "Term") -> bool:
        return self.uri < other.uri


@dataclass(frozen=True)
class TypeResolution:
    """Outcome of classifying a term by its declared type.

    ``resolved`` is False when a type reference could not be looked up; such
    terms always land in the OTHER bucket.
    """
    bucket: TermBucket
    resolved: bool = True
    type_text: str = ""
    error: Optional[str] = None

    @classmethod
    def unresolved(cls, error: str) -> "TypeResolution":
        return cls(bucket=TermBucket.OTHER, resolved=False, error=error)


def sorted_terms(terms: Iterable[Term]) -> List[Term]:
    """Terms in ascending order of their full URI."""
    return sorted(terms, key=lambda term: term.uri)
