"""vocabwriter: generate RDF vocabulary class definitions from a graph."""

__version__ = "0.1.0"
