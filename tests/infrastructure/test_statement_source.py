"""Tests for reading vocabulary documents."""

import io

import pytest

from vocabwriter.application.services.vocabulary_generator import VocabularyGenerator
from vocabwriter.config.writer_config import WriterConfig
from vocabwriter.domain.exceptions import ConfigurationError, InputError
from vocabwriter.infrastructure.statement_source import StatementSource, feed


class TestStatementSource:

    def test_format_guessed(self, sample_file):
        assert StatementSource(sample_file).input_format == "turtle"

    def test_unknown_extension(self, tmp_path):
        with pytest.raises(ConfigurationError):
            StatementSource(tmp_path / "vocab.unknown")

    def test_reads_prefixes_and_statements(self, sample_file):
        source = StatementSource(sample_file)
        assert ("ex", "http://ex.org/v#") in set(source.namespaces())
        assert len(list(source)) == 14

    def test_unparsable_document(self, tmp_path):
        path = tmp_path / "bad.ttl"
        path.write_text("this is not turtle <<<", encoding="utf-8")
        source = StatementSource(path)
        with pytest.raises(InputError, match="bad.ttl"):
            source.load()


class TestFeed:

    def test_sample_vocabulary(self, sample_file):
        output = io.StringIO()
        generator = VocabularyGenerator(output, WriterConfig(base_uri="http://ex.org/v#", class_name="EX"))
        count = feed(StatementSource(sample_file), generator)
        report = generator.write_epilogue()

        assert count == 14
        body = output.getvalue().split('RDF::Vocabulary("http://ex.org/v#")\n', 1)[1]
        assert body == (
            "\n"
            "    # Class definitions\n"
            "    term :Person,\n"
            "      comment: %(A human being \\(alive or dead\\).).freeze,\n"
            '      label: "Person".freeze,\n'
            '      type: "rdfs:Class".freeze\n'
            "\n"
            "    # Property definitions\n"
            "    property :name,\n"
            '      domain: "ex:Person".freeze,\n'
            '      label: "name".freeze,\n'
            '      range: "xsd:string".freeze,\n'
            '      type: "rdf:Property".freeze\n'
            "\n"
            "    # Datatype definitions\n"
            "    term :Age,\n"
            '      label: "Age".freeze,\n'
            '      type: "rdfs:Datatype".freeze\n'
            "\n"
            "    # Extra definitions\n"
            "    term :alice,\n"
            '      label: "Alice".freeze,\n'
            '      type: "ex:Person".freeze\n'
            "  end\n"
            "end\n"
        )
        assert report.total_terms == 4
        assert report.unresolved == []
