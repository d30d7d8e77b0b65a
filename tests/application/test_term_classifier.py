"""Tests for the term classifier."""

import pytest

from vocabwriter.application.services.term_classifier import bucket_for_type, classify
from vocabwriter.domain.vocabulary import Vocabulary
from vocabwriter.domain.vocabulary_models import Term, TermBucket, ValueList

BASE = "http://ex.org/v#"


def make_term(name, *types):
    term = Term(uri=BASE + name, name=name)
    if types:
        term.attributes["type"] = ValueList(types)
    return term


class TestBucketForType:
    """Test substring matching on type strings."""

    @pytest.mark.parametrize("type_text,bucket", [
        ("http://www.w3.org/2002/07/owl#Class", TermBucket.CLASS),
        ("http://www.w3.org/2000/01/rdf-schema#Class", TermBucket.CLASS),
        ("http://www.w3.org/2002/07/owl#ObjectProperty", TermBucket.PROPERTY),
        ("rdf:Property", TermBucket.PROPERTY),
        ("http://www.w3.org/2000/01/rdf-schema#Datatype", TermBucket.DATATYPE),
        ("http://www.w3.org/2002/07/owl#NamedIndividual", TermBucket.OTHER),
        ("", TermBucket.OTHER),
    ])
    def test_buckets(self, type_text, bucket):
        assert bucket_for_type(type_text) == bucket

    def test_class_checked_before_property(self):
        assert bucket_for_type("ex:PropertyClass") == TermBucket.CLASS

    def test_property_checked_before_datatype(self):
        assert bucket_for_type("ex:DatatypeProperty") == TermBucket.PROPERTY

    def test_case_sensitive(self):
        assert bucket_for_type("ex:class") == TermBucket.OTHER

    def test_deterministic(self):
        results = {bucket_for_type("owl:Class") for _ in range(10)}
        assert results == {TermBucket.CLASS}


class TestClassify:
    """Test classification of terms."""

    def test_without_vocabulary_uses_declared_types(self):
        result = classify(make_term("Foo", "owl:Class"))
        assert result.bucket == TermBucket.CLASS
        assert result.resolved

    def test_untyped_term_is_other(self):
        result = classify(make_term("foo"))
        assert result.bucket == TermBucket.OTHER
        assert result.resolved

    def test_multiple_types(self):
        result = classify(make_term("foo", "owl:NamedIndividual", "owl:DatatypeProperty"))
        assert result.bucket == TermBucket.PROPERTY

    def test_resolved_through_vocabulary(self):
        term = make_term("Foo", "owl:Class")
        vocab = Vocabulary(BASE, terms={"Foo": term}, namespaces={"owl": "http://www.w3.org/2002/07/owl#"})
        result = classify(term, vocab)
        assert result.bucket == TermBucket.CLASS
        assert result.type_text == "http://www.w3.org/2002/07/owl#Class"

    def test_unresolvable_type_is_other(self):
        term = make_term("Foo", "missing:Class")
        vocab = Vocabulary(BASE, terms={"Foo": term})
        result = classify(term, vocab)
        assert result.bucket == TermBucket.OTHER
        assert not result.resolved
        assert "missing:Class" in result.error

    def test_strict_forward_reference_is_other(self):
        term = make_term("Foo", BASE + "MetaClass")
        strict = Vocabulary(BASE, terms={"Foo": term}, strict=True)
        lenient = Vocabulary(BASE, terms={"Foo": term})
        assert classify(term, strict).bucket == TermBucket.OTHER
        assert classify(term, lenient).bucket == TermBucket.CLASS
