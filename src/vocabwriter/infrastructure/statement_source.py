"""RDF document reader feeding the vocabulary generator."""

import logging
from pathlib import Path
from typing import Iterator, Optional, Tuple, Union

from rdflib import Graph
from rdflib.term import Node
from rdflib.util import guess_format

from vocabwriter.domain.exceptions import ConfigurationError, InputError

logger = logging.getLogger(__name__)

Triple = Tuple[Node, Node, Node]


class StatementSource:
    """Reads the statements and prefix bindings of one RDF document."""

    def __init__(self, location: Union[str, Path], input_format: Optional[str] = None):
        self.location = str(location)
        self.input_format = input_format or guess_format(self.location)
        if self.input_format is None:
            raise ConfigurationError(f"Cannot determine RDF format of {self.location}; pass --input-format")
        self._graph: Optional[Graph] = None

    def load(self) -> Graph:
        """Parse the document on first use.

        Raises:
            InputError: if the document cannot be read or parsed
        """
        if self._graph is None:
            graph = Graph(bind_namespaces="none")
            try:
                graph.parse(self.location, format=self.input_format)
            except Exception as e:
                # rdflib parsers raise their own unrelated exception types.
                raise InputError(f"Cannot parse {self.location} as {self.input_format}: {e}") from e
            logger.info("Read %d statements from %s", len(graph), self.location)
            self._graph = graph
        return self._graph

    def namespaces(self) -> Iterator[Tuple[str, str]]:
        for prefix, namespace in self.load().namespaces():
            yield prefix, str(namespace)

    def __iter__(self) -> Iterator[Triple]:
        return iter(self.load())


def feed(source: StatementSource, generator) -> int:
    """Send the source's prefixes and statements to ``generator``.

    Returns the number of statements written.
    """
    for prefix, namespace in source.namespaces():
        if prefix:
            generator.bind(prefix, namespace)
    count = 0
    for subject, predicate, obj in source:
        generator.write_triple(subject, predicate, obj)
        count += 1
    return count
