"""Configuration package for the vocabulary writer."""

from .writer_config import WriterConfig, load_writer_config, parse_extra

__all__ = ["WriterConfig", "load_writer_config", "parse_extra"]
