"""Apache Camel project generator with wsdl2rest support."""

from .cli import generate, main
from .artifact_locator import find_wsdl2rest_jar
from .models import ScaffoldRequest, DSLValidation, ConversionResult, ConverterOptions
from .pom_merger import reconcile_build_fragment
from .validators import validate_package, validate_camel_dsl
from .wsdl2rest_runner import invoke_converter

__all__ = [
    "generate", "main", "find_wsdl2rest_jar", "ScaffoldRequest", "DSLValidation",
    "ConversionResult", "ConverterOptions", "reconcile_build_fragment",
    "validate_package", "validate_camel_dsl", "invoke_converter",
]
