"""Well-known RDF namespaces and attribute key mapping.

Prefixes bound here are used to compact URI objects into prefixed names
(``owl:Class``, ``dc:creator``) when building term attribute maps.
"""

from typing import Dict, Optional, Tuple

from rdflib import Namespace
from rdflib.namespace import DC, DCTERMS, FOAF, OWL, RDF, RDFS, SKOS, XSD

SCHEMA = Namespace("http://schema.org/")
VANN = Namespace("http://purl.org/vocab/vann/")
VOID = Namespace("http://rdfs.org/ns/void#")
PROV = Namespace("http://www.w3.org/ns/prov#")
SH = Namespace("http://www.w3.org/ns/shacl#")

WELL_KNOWN_PREFIXES: Dict[str, Namespace] = {
    "rdf": RDF,
    "rdfs": RDFS,
    "owl": OWL,
    "xsd": XSD,
    "dc": DCTERMS,
    "dc11": DC,
    "foaf": FOAF,
    "prov": PROV,
    "schema": SCHEMA,
    "sh": SH,
    "skos": SKOS,
    "vann": VANN,
    "void": VOID,
}


class AttributeKeys:
    """Short attribute keys for the predicates every vocabulary uses."""
    TYPE = "type"
    SUB_CLASS_OF = "subClassOf"
    SUB_PROPERTY_OF = "subPropertyOf"
    RANGE = "range"
    DOMAIN = "domain"
    COMMENT = "comment"
    LABEL = "label"
    INVERSE_OF = "inverseOf"
    DOMAIN_INCLUDES = "domainIncludes"
    RANGE_INCLUDES = "rangeIncludes"


PREDICATE_KEYS: Dict[str, str] = {
    str(RDF.type): AttributeKeys.TYPE,
    str(RDFS.subClassOf): AttributeKeys.SUB_CLASS_OF,
    str(RDFS.subPropertyOf): AttributeKeys.SUB_PROPERTY_OF,
    str(RDFS.range): AttributeKeys.RANGE,
    str(RDFS.domain): AttributeKeys.DOMAIN,
    str(RDFS.comment): AttributeKeys.COMMENT,
    str(RDFS.label): AttributeKeys.LABEL,
    str(SCHEMA.inverseOf): AttributeKeys.INVERSE_OF,
    str(SCHEMA.domainIncludes): AttributeKeys.DOMAIN_INCLUDES,
    str(SCHEMA.rangeIncludes): AttributeKeys.RANGE_INCLUDES,
}


def split_prefixed_name(value: str) -> Optional[Tuple[str, str]]:
    """Split ``prefix:local`` into its parts; None when there is no colon."""
    prefix, sep, local = value.partition(":")
    if not sep:
        return None
    return prefix, local
