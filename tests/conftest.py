"""Shared fixtures for vocabwriter tests."""

import io

import pytest

from vocabwriter.application.services.vocabulary_generator import VocabularyGenerator
from vocabwriter.config.writer_config import WriterConfig

EX_BASE = "http://ex.org/v#"

SAMPLE_TURTLE = """\
@prefix ex: <http://ex.org/v#> .
@prefix rdf: <http://www.w3.org/1999/02/22-rdf-syntax-ns#> .
@prefix rdfs: <http://www.w3.org/2000/01/rdf-schema#> .
@prefix owl: <http://www.w3.org/2002/07/owl#> .
@prefix xsd: <http://www.w3.org/2001/XMLSchema#> .
@prefix dc: <http://purl.org/dc/terms/> .

<http://ex.org/v> a owl:Ontology ;
    dc:title "Example vocabulary" .

ex:Person a rdfs:Class ;
    rdfs:label "Person" ;
    rdfs:comment "A human being (alive or dead)." .

ex:name a rdf:Property ;
    rdfs:label "name" ;
    rdfs:label "nom"@fr ;
    rdfs:domain ex:Person ;
    rdfs:range xsd:string .

ex:Age a rdfs:Datatype ;
    rdfs:label "Age" .

ex:alice a ex:Person ;
    rdfs:label "Alice" .
"""


@pytest.fixture
def output():
    """In-memory sink for generated source."""
    return io.StringIO()


@pytest.fixture
def ex_config():
    return WriterConfig(base_uri=EX_BASE, class_name="EX")


@pytest.fixture
def generator(output, ex_config):
    return VocabularyGenerator(output, ex_config)


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "example.ttl"
    path.write_text(SAMPLE_TURTLE, encoding="utf-8")
    return path
