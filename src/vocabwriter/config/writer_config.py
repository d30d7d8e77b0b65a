"""
Vocabulary Writer Configuration

Options controlling one generation run. Values can come from keyword
arguments, a YAML file, or ``VOCABWRITER_*`` environment variables.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union
from urllib.parse import unquote, urlsplit

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from vocabwriter.domain.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "VOCABWRITER_"
DEFAULT_MODULE_NAME = "RDF"


def parse_extra(raw: Any) -> Optional[Dict[str, Any]]:
    """Parse extra term data.

    Accepts a mapping, a JSON string, or a URI-encoded JSON string.

    Raises:
        ConfigurationError: if the data is not an object mapping term names
            to attribute objects
    """
    if raw is None or raw == "":
        return None
    if isinstance(raw, Mapping):
        return _check_extra_shape(dict(raw))
    if not isinstance(raw, str):
        raise ConfigurationError(f"extra data must be a JSON object, got {type(raw).__name__}")

    try:
        data = json.loads(raw)
    except json.JSONDecodeError:
        try:
            data = json.loads(unquote(raw))
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"extra data is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError("extra data must be a JSON object keyed by term name")
    return _check_extra_shape(data)


def _check_extra_shape(data: Dict[str, Any]) -> Dict[str, Any]:
    for name, attributes in data.items():
        if not isinstance(attributes, Mapping):
            raise ConfigurationError(f"extra data for {name!r} must be an object of attributes")
    return data


class WriterConfig(BaseModel):
    """Options for generating one vocabulary class."""

    base_uri: str = Field(..., description="URI of the vocabulary; terms are named relative to it")
    class_name: Optional[str] = Field(None, description="Name of the generated class")
    module_name: str = Field(default=DEFAULT_MODULE_NAME, description="Module containing the class")
    strict: bool = Field(default=False, description="Generate a StrictVocabulary subclass")
    extra: Optional[Dict[str, Any]] = Field(None, description="Extra term attributes keyed by term name")
    location: Optional[str] = Field(None, description="Source label recorded in the generated header")

    @field_validator("base_uri")
    @classmethod
    def validate_base_uri(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("base_uri option required")
        return v

    @field_validator("extra", mode="before")
    @classmethod
    def validate_extra(cls, v):
        return parse_extra(v)

    @property
    def source(self) -> str:
        """Label for the provenance header."""
        return self.location or self.base_uri

    @property
    def resolved_class_name(self) -> str:
        """Configured class name, or one derived from the base URI."""
        if self.class_name:
            return self.class_name
        parts = urlsplit(self.base_uri)
        # Version segments such as "0.1" carry no name.
        candidates = [parts.netloc] + [s for s in parts.path.split("/") if s] + [parts.fragment]
        segment = next((s for s in reversed(candidates) if any(ch.isalpha() for ch in s)), "")
        name = "".join(ch for ch in segment.title() if ch.isalnum())
        if not name or name[0].isdigit():
            name = "Vocab" + name
        return name

    model_config = {
        "json_schema_extra": {
            "example": {
                "base_uri": "http://xmlns.com/foaf/0.1/",
                "class_name": "FOAF",
                "module_name": "RDF::Vocab",
                "strict": True,
            }
        }
    }


def _from_environ(environ: Mapping[str, str]) -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    for field_name in WriterConfig.model_fields:
        raw = environ.get(ENV_PREFIX + field_name.upper())
        if raw is None:
            continue
        if field_name == "strict":
            values[field_name] = raw.strip().lower() in ("1", "true", "yes", "on")
        else:
            values[field_name] = raw
    return values


def _from_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    path = Path(path)
    if not path.is_file():
        raise ConfigurationError(f"Config file not found: {path}")
    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping")
    # Allow options nested under a top-level "vocabwriter" key.
    return dict(data.get("vocabwriter", data))


def load_writer_config(
    config_path: Optional[Union[str, Path]] = None,
    environ: Optional[Mapping[str, str]] = None,
    **overrides: Any,
) -> WriterConfig:
    """Build a WriterConfig.

    Precedence, lowest first: environment, YAML file, keyword overrides.
    Overrides set to None are ignored.

    Raises:
        ConfigurationError: if a required option is missing or invalid
    """
    values: Dict[str, Any] = {}
    if environ is not None:
        values.update(_from_environ(environ))
    if config_path is not None:
        values.update(_from_yaml(config_path))
    values.update({k: v for k, v in overrides.items() if v is not None})

    if not values.get("base_uri"):
        raise ConfigurationError("base_uri option required")

    try:
        config = WriterConfig(**values)
    except ValidationError as e:
        raise ConfigurationError(str(e)) from e

    logger.debug("Writer config: base_uri=%s class=%s strict=%s",
                 config.base_uri, config.resolved_class_name, config.strict)
    return config
