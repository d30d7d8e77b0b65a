"""Vocabulary view over an RDF graph.

Builds the read-only set of terms described by a graph relative to a base
URI, and resolves the term references held in their attribute maps.

Usage:
    graph = Graph()
    graph.parse("foaf.ttl")
    vocab = Vocabulary.from_graph(graph, base_uri="http://xmlns.com/foaf/0.1/")
    for term in vocab:
        print(term.name, vocab.type_uris(term))
"""

import logging
import re
from typing import Any, Dict, Iterator, List, Mapping, Optional

from rdflib import Graph, Literal, URIRef

from .exceptions import ConfigurationError, UndefinedTermError
from .namespaces import PREDICATE_KEYS, WELL_KNOWN_PREFIXES, split_prefixed_name
from .vocabulary_models import (
    VOCAB_KEY,
    Scalar,
    Term,
    ValueList,
    as_attribute_value,
    sorted_terms,
)

logger = logging.getLogger(__name__)

_ENGLISH_TAG = re.compile(r"^en(-|$)", re.IGNORECASE)


class Vocabulary:
    """Terms of one vocabulary, keyed by local name."""

    def __init__(
        self,
        base_uri: str,
        terms: Optional[Dict[str, Term]] = None,
        namespaces: Optional[Mapping[str, str]] = None,
        strict: bool = False,
    ):
        if not base_uri:
            raise ConfigurationError("base_uri is required")
        self.base_uri = base_uri
        self.strict = strict
        self._terms: Dict[str, Term] = dict(terms or {})
        self._namespaces: Dict[str, str] = dict(namespaces or {})

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_graph(
        cls,
        graph: Graph,
        base_uri: str,
        strict: bool = False,
        extra: Optional[Mapping[str, Any]] = None,
    ) -> "Vocabulary":
        """Materialize the vocabulary described by ``graph``.

        Args:
            graph: Statements describing the vocabulary
            base_uri: Namespace of the vocabulary's terms
            strict: Whether references into the vocabulary's own namespace
                must name a defined term
            extra: Additional term attributes, keyed by local name

        Returns:
            Vocabulary holding one Term per subject under ``base_uri``
        """
        namespaces = {prefix: str(ns) for prefix, ns in WELL_KNOWN_PREFIXES.items()}
        for prefix, ns in graph.namespaces():
            if prefix:
                namespaces[prefix] = str(ns)

        vocab = cls(base_uri, namespaces=namespaces, strict=strict)
        collected: Dict[str, Dict[str, List[str]]] = {}
        skipped = 0

        for subject, predicate, obj in graph:
            if not isinstance(subject, URIRef) or not str(subject).startswith(base_uri):
                skipped += 1
                continue
            name = str(subject)[len(base_uri):]
            if not name:
                # The vocabulary's own description is not a term.
                continue

            key = PREDICATE_KEYS.get(str(predicate)) or vocab.compact(str(predicate))
            value = vocab._object_value(obj)
            attributes = collected.setdefault(name, {})
            if value is not None:
                attributes.setdefault(key, []).append(value)

        if skipped:
            logger.debug("Skipped %d statements outside <%s>", skipped, base_uri)

        for name, attributes in collected.items():
            term = Term(uri=base_uri + name, name=name)
            for key, values in attributes.items():
                term.attributes[key] = ValueList(tuple(sorted(set(values))))
            term.attributes[VOCAB_KEY] = Scalar(base_uri)
            vocab._terms[name] = term

        if extra:
            vocab.merge_extra(extra)

        logger.debug("Built vocabulary <%s> with %d terms", base_uri, len(vocab))
        return vocab

    def _object_value(self, obj) -> Optional[str]:
        if isinstance(obj, URIRef):
            return self.compact(str(obj))
        if isinstance(obj, Literal):
            if obj.language is None or _ENGLISH_TAG.match(obj.language):
                return str(obj)
            return None
        return None

    def merge_extra(self, extra: Mapping[str, Any]) -> None:
        """Add or override attributes from operator-supplied data."""
        if not isinstance(extra, Mapping):
            raise ConfigurationError("extra data must be an object keyed by term name")
        for name, attributes in extra.items():
            if not isinstance(attributes, Mapping):
                raise ConfigurationError(f"extra data for {name!r} must be an object")
            name = str(name)
            term = self._terms.get(name)
            if term is None:
                term = Term(uri=self.base_uri + name, name=name)
                self._terms[name] = term
            for key, value in attributes.items():
                term.attributes[str(key)] = as_attribute_value(value)
            term.attributes[VOCAB_KEY] = Scalar(self.base_uri)

    # ------------------------------------------------------------------
    # Term access
    # ------------------------------------------------------------------

    def __iter__(self) -> Iterator[Term]:
        return iter(sorted_terms(self._terms.values()))

    def __len__(self) -> int:
        return len(self._terms)

    def __contains__(self, name: object) -> bool:
        return name in self._terms

    def __getitem__(self, name: str) -> Term:
        try:
            return self._terms[name]
        except KeyError:
            raise UndefinedTermError(self.base_uri + name) from None

    @property
    def namespaces(self) -> Dict[str, str]:
        return dict(self._namespaces)

    # ------------------------------------------------------------------
    # Reference handling
    # ------------------------------------------------------------------

    def compact(self, uri: str) -> str:
        """Return ``prefix:local`` for ``uri``, or ``uri`` when no prefix fits."""
        best = None
        for prefix, ns in sorted(self._namespaces.items()):
            if not uri.startswith(ns):
                continue
            local = uri[len(ns):]
            if not local or "/" in local or "#" in local:
                continue
            if best is None or len(ns) > len(best[1]):
                best = (prefix, ns, local)
        if best is None:
            return uri
        return f"{best[0]}:{best[2]}"

    def resolve(self, reference: str) -> str:
        """Expand a prefixed name or URI reference to a full URI.

        Raises:
            UndefinedTermError: if the prefix is unbound, the reference is a
                bare token, or (for strict vocabularies) it names a term of
                this vocabulary that is not defined
        """
        parts = split_prefixed_name(reference)
        if parts is None:
            raise UndefinedTermError(reference, "not a URI or prefixed name")
        prefix, local = parts
        if prefix in self._namespaces:
            uri = self._namespaces[prefix] + local
        elif local.startswith("//") or prefix in ("urn", "tag", "mailto"):
            uri = reference
        else:
            raise UndefinedTermError(reference, "unknown prefix")

        if self.strict and uri.startswith(self.base_uri):
            name = uri[len(self.base_uri):]
            if name and name not in self._terms:
                raise UndefinedTermError(uri)
        return uri

    def type_uris(self, term: Term) -> List[str]:
        """Resolved URIs of the term's declared types."""
        return [self.resolve(ref) for ref in term.declared_types]
