"""Vocabulary Generator.

Collects statements into a graph and, at end of input, writes the Ruby
class definition for the vocabulary they describe.

The generator moves through four states:
- COLLECTING: statements are added to the graph
- FINALIZING: the vocabulary view is built from the graph
- EMITTING: the header, bucketed declarations and footer are written
- DONE: no further calls are accepted

Usage:
    generator = VocabularyGenerator(sys.stdout, WriterConfig(base_uri=..., class_name="FOAF"))
    for triple in triples:
        generator.write_triple(*triple)
    report = generator.write_epilogue()
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, TextIO, Tuple, Union

from rdflib import Graph, Literal, URIRef
from rdflib.term import Node

from vocabwriter.config.writer_config import WriterConfig, load_writer_config
from vocabwriter.domain.exceptions import ConfigurationError, WriterStateError
from vocabwriter.domain.vocabulary import Vocabulary
from vocabwriter.domain.vocabulary_models import BUCKET_ORDER, AttributeValue, TermBucket

from .declaration_emitter import emit_declaration
from .term_classifier import classify

logger = logging.getLogger(__name__)

HEADER_TEMPLATE = """\
# -*- encoding: utf-8 -*-
# frozen_string_literal: true
# This file generated automatically using vocabwriter from {source}
require 'rdf'
module {module_name}
  # @!parse
  #   # Vocabulary for <{base_uri}>
  #   class {class_name} < RDF::{parent}
  #   end
  class {class_name} < RDF::{parent}("{base_uri}")
"""

FOOTER = "  end\nend\n"


class WriterState(str, Enum):
    """Lifecycle state of a VocabularyGenerator."""
    COLLECTING = "collecting"
    FINALIZING = "finalizing"
    EMITTING = "emitting"
    DONE = "done"


@dataclass
class GenerationReport:
    """Summary of one generation run."""
    counts: Dict[TermBucket, int] = field(default_factory=lambda: {b: 0 for b in BUCKET_ORDER})
    unresolved: List[str] = field(default_factory=list)
    overwrites: int = 0
    statements: int = 0

    @property
    def total_terms(self) -> int:
        return sum(self.counts.values())


class VocabularyGenerator:
    """Generates a vocabulary class definition from RDF statements."""

    def __init__(self, output: TextIO, config: Union[WriterConfig, Mapping[str, Any]]):
        """
        Args:
            output: Text sink receiving the generated source
            config: WriterConfig, or a mapping of its options

        Raises:
            ConfigurationError: if no base URI is configured
        """
        if output is None:
            raise ConfigurationError("an output sink is required")
        if isinstance(config, Mapping):
            config = load_writer_config(**config)
        if not getattr(config, "base_uri", None):
            raise ConfigurationError("base_uri option required")

        self.output = output
        self.config = config
        self.state = WriterState.COLLECTING
        self.report = GenerationReport()
        self._graph = Graph(bind_namespaces="core")

    @property
    def base_uri(self) -> str:
        return self.config.base_uri

    # ------------------------------------------------------------------
    # Collecting
    # ------------------------------------------------------------------

    def _require_collecting(self) -> None:
        if self.state is not WriterState.COLLECTING:
            raise WriterStateError(f"cannot accept statements in state {self.state.value}")

    def bind(self, prefix: str, namespace: str) -> None:
        """Register a namespace prefix used when compacting references."""
        self._require_collecting()
        self._graph.bind(prefix, namespace, override=True, replace=True)

    def write_triple(self, subject: Any, predicate: Any, obj: Any) -> None:
        """Add one statement. Plain strings are taken as URIs, except objects,
        which are taken as literals."""
        self._require_collecting()
        if not isinstance(subject, Node):
            subject = URIRef(str(subject))
        if not isinstance(predicate, Node):
            predicate = URIRef(str(predicate))
        if not isinstance(obj, Node):
            obj = Literal(obj)
        self._graph.add((subject, predicate, obj))
        self.report.statements += 1

    def write_statements(self, triples: Iterable[Tuple[Any, Any, Any]]) -> None:
        for subject, predicate, obj in triples:
            self.write_triple(subject, predicate, obj)

    # ------------------------------------------------------------------
    # Finalizing and emitting
    # ------------------------------------------------------------------

    def write_epilogue(self) -> GenerationReport:
        """Signal end of input and write the vocabulary definition."""
        self._require_collecting()
        self.state = WriterState.FINALIZING
        vocab = Vocabulary.from_graph(
            self._graph,
            base_uri=self.base_uri,
            strict=self.config.strict,
            extra=self.config.extra,
        )
        buckets = self._partition(vocab)

        self.state = WriterState.EMITTING
        self._write_header()
        for bucket in BUCKET_ORDER:
            terms = buckets[bucket]
            if not terms:
                continue
            self.output.write(f"\n    # {bucket.section_title}\n")
            for name, attributes in terms.items():
                self.output.write(emit_declaration(name, attributes, bucket) + "\n")
        self.output.write(FOOTER)

        self._graph = Graph(bind_namespaces="core")
        self.state = WriterState.DONE
        logger.info(
            "Generated %s with %d terms (%s)",
            self.config.resolved_class_name,
            self.report.total_terms,
            ", ".join(f"{b.value}={n}" for b, n in self.report.counts.items()),
        )
        return self.report

    def _partition(self, vocab: Vocabulary) -> Dict[TermBucket, Dict[str, Dict[str, AttributeValue]]]:
        """Split terms into buckets, in URI order. A repeated local name
        replaces the earlier entry."""
        buckets: Dict[TermBucket, Dict[str, Dict[str, AttributeValue]]] = {b: {} for b in BUCKET_ORDER}
        for term in vocab:
            resolution = classify(term, vocab)
            if not resolution.resolved:
                self.report.unresolved.append(term.uri)
            if term.name in buckets[resolution.bucket]:
                self.report.overwrites += 1
            else:
                self.report.counts[resolution.bucket] += 1
            buckets[resolution.bucket][term.name] = term.attributes
            logger.debug("%s -> %s", term.uri, resolution.bucket.value)

        if self.report.unresolved:
            logger.info("%d terms with unresolved types placed in %s",
                        len(self.report.unresolved), TermBucket.OTHER.section_title)
        if self.report.overwrites:
            logger.warning("%d term definitions replaced by a later term with the same name",
                           self.report.overwrites)
        return buckets

    def _write_header(self) -> None:
        parent = "StrictVocabulary" if self.config.strict else "Vocabulary"
        self.output.write(HEADER_TEMPLATE.format(
            source=self.config.source,
            module_name=self.config.module_name,
            class_name=self.config.resolved_class_name,
            parent=parent,
            base_uri=self.base_uri,
        ))
