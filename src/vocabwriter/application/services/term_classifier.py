"""Term Classifier.

Assigns each vocabulary term to one of the four emission buckets by
looking for fixed substrings in its resolved type URIs. Checks run in
priority order, so a type mentioning both ``Class`` and ``Property``
is a class.
"""

import logging
from typing import Optional, Tuple

from vocabwriter.domain.exceptions import UndefinedTermError
from vocabwriter.domain.vocabulary import Vocabulary
from vocabwriter.domain.vocabulary_models import Term, TermBucket, TypeResolution

logger = logging.getLogger(__name__)

TYPE_PATTERNS: Tuple[Tuple[str, TermBucket], ...] = (
    ("Class", TermBucket.CLASS),
    ("Property", TermBucket.PROPERTY),
    ("Datatype", TermBucket.DATATYPE),
)


def bucket_for_type(type_text: str) -> TermBucket:
    """Bucket for a type string; case-sensitive substring match."""
    for pattern, bucket in TYPE_PATTERNS:
        if pattern in type_text:
            return bucket
    return TermBucket.OTHER


def classify(term: Term, vocabulary: Optional[Vocabulary] = None) -> TypeResolution:
    """Classify ``term`` by its declared type(s).

    When a vocabulary is given, type references are resolved through it
    first. A reference that cannot be resolved yields an unresolved
    result in the OTHER bucket instead of an error.
    """
    if vocabulary is None:
        types = term.declared_types
    else:
        try:
            types = vocabulary.type_uris(term)
        except UndefinedTermError as e:
            logger.debug("Type of %s unresolved: %s", term.uri, e)
            return TypeResolution.unresolved(str(e))

    type_text = " ".join(types)
    return TypeResolution(bucket=bucket_for_type(type_text), type_text=type_text)
