"""Input validation for generator answers.

Pure predicates with no file I/O and no internal package imports other than
the data model. None of these raise; callers decide how to report failures.
"""

import re

from .models import CAMEL_DSLS, WSDL2REST_DSLS, DSLValidation

# Java reserved words, including the literals that cannot be identifiers.
JAVA_RESERVED_WORDS = frozenset({
    "abstract", "assert", "boolean", "break", "byte", "case", "catch",
    "char", "class", "const", "continue", "default", "do", "double", "else",
    "enum", "extends", "final", "finally", "float", "for", "goto", "if",
    "implements", "import", "instanceof", "int", "interface", "long",
    "native", "new", "package", "private", "protected", "public", "return",
    "short", "static", "strictfp", "super", "switch", "synchronized", "this",
    "throw", "throws", "transient", "try", "void", "volatile", "while",
    "true", "false", "null",
})

IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

# Maven artifactId grammar; the name is also used verbatim in XML and file content.
PROJECT_NAME_RE = re.compile(r"^[A-Za-z0-9_.-]+$")

# 2.22.2, 2.21.0.fuse-710018, 3.0.0-M1
CAMEL_VERSION_RE = re.compile(r"^\d+\.\d+\.\d+([.-][A-Za-z0-9][A-Za-z0-9.-]*)?$")

WSDL2REST_DSL_MESSAGE = "When using wsdl2rest, the Camel DSL must be either 'spring' or 'blueprint'."


def validate_package(name: str) -> bool:
    """Check whether ``name`` is a legal Java package name.

    Each dot-separated segment must start with a letter or underscore,
    contain only letters, digits and underscores, and must not be a Java
    reserved word.

        com.example.routes   → True
        invalid@.pkg.name    → False
        a.name.with.package  → False  (``package`` is reserved)

    Args:
        name: Candidate package name.

    Returns:
        ``True`` if the name is legal, ``False`` otherwise.
    """
    if not name:
        return False
    for segment in name.split("."):
        if not IDENTIFIER_RE.match(segment) or segment in JAVA_RESERVED_WORDS:
            return False
    return True


def validate_camel_dsl(dsl: str, wsdl2rest: bool) -> DSLValidation:
    """Check that a Camel DSL can be used for the requested mode.

    All three DSLs are accepted for plain projects. wsdl2rest writes an XML
    route definition, so only ``spring`` and ``blueprint`` are allowed with it.

    Args:
        dsl: The requested DSL name.
        wsdl2rest: Whether the wsdl2rest converter will run.

    Returns:
        A valid ``DSLValidation``, or an invalid one carrying the message to
        show the user.
    """
    if dsl not in CAMEL_DSLS:
        return DSLValidation(False, f"The Camel DSL must be one of {', '.join(CAMEL_DSLS)} (got '{dsl}').")
    if wsdl2rest and dsl not in WSDL2REST_DSLS:
        return DSLValidation(False, WSDL2REST_DSL_MESSAGE)
    return DSLValidation(True)


def validate_camel_version(version: str) -> bool:
    """Check that ``version`` looks like a Camel release (``2.22.2``)."""
    return bool(version) and CAMEL_VERSION_RE.match(version) is not None


def validate_project_name(name: str) -> bool:
    """Check that ``name`` is usable as a Maven artifactId (``MyApp``, ``order-service``)."""
    return bool(name) and PROJECT_NAME_RE.match(name) is not None
