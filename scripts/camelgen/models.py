"""Scaffolding data model classes.

Pure data structures describing a generator run and the results of the
wsdl2rest conversion. No behavior or imports from other camelgen modules.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

# Camel version offered by default when none is given.
DEFAULT_CAMEL_VERSION = "2.22.2"

# Output directory for generated Java sources, relative to the project root.
DEFAULT_OUT_DIRECTORY = "src/main/java"

# Supplementary build fragment stamped for wsdl2rest runs; merged into pom.xml.
WSDL2REST_FRAGMENT = "pom.xml.wsdl2rest"

CAMEL_DSLS = ("spring", "blueprint", "java")
WSDL2REST_DSLS = ("spring", "blueprint")

# DSL → route definition resource (java DSL routes live in Java sources).
CONTEXT_FILES = {
    "spring": "src/main/resources/META-INF/spring/camel-context.xml",
    "blueprint": "src/main/resources/OSGI-INF/blueprint/blueprint.xml",
}


@dataclass(frozen=True)
class ScaffoldRequest:
    """All answers for a single generator run.

    Built once from prompts and arguments, then passed unchanged through the
    pipeline.

    Attributes:
        name: Project name, used as the Maven artifactId.
        package: Java package (also the Maven groupId).
        camel_version: Apache Camel version for the generated pom.xml.
        camel_dsl: One of ``spring``, ``blueprint`` or ``java``.
        wsdl2rest: Whether to run the wsdl2rest converter after templating.
        wsdl: WSDL location (filesystem path or URL) for wsdl2rest.
        out_directory: Output directory for generated Java sources.
        jaxws_url: Optional JAX-WS endpoint address override.
        jaxrs_url: Optional JAX-RS endpoint address override.
        debug: Echo the converter command line and its output.
    """
    name: str
    package: str
    camel_version: str = DEFAULT_CAMEL_VERSION
    camel_dsl: str = "spring"
    wsdl2rest: bool = False
    wsdl: Optional[str] = None
    out_directory: Optional[str] = None
    jaxws_url: Optional[str] = None
    jaxrs_url: Optional[str] = None
    debug: bool = False

    @property
    def package_path(self) -> str:
        """The package as a relative directory path (``com/foo/bar``)."""
        return self.package.replace(".", "/")

    @property
    def context_file(self) -> Optional[str]:
        """Route definition resource for the DSL, or ``None`` for the Java DSL."""
        return CONTEXT_FILES.get(self.camel_dsl)


@dataclass(frozen=True)
class DSLValidation:
    """Outcome of a Camel DSL check.

    Attributes:
        valid: ``True`` if the DSL can be used for the requested mode.
        message: Human-readable reason when ``valid`` is ``False``.
    """
    valid: bool
    message: Optional[str] = None


@dataclass
class ConverterOptions:
    """Settings for one wsdl2rest invocation.

    Attributes:
        camel_dsl: Selects ``--camel-context`` or ``--blueprint-context``.
        context_file: Route definition file the converter should write.
        jaxws_url: Optional JAX-WS endpoint address override.
        jaxrs_url: Optional JAX-RS endpoint address override.
        debug: Echo the command line and the converter's output.
        timeout: Seconds to wait for the converter before giving up.
        java: Java executable used to launch the jar.
    """
    camel_dsl: str = "spring"
    context_file: Optional[str] = None
    jaxws_url: Optional[str] = None
    jaxrs_url: Optional[str] = None
    debug: bool = False
    timeout: float = 300
    java: str = "java"


@dataclass
class ConversionResult:
    """What a successful wsdl2rest run left behind.

    Attributes:
        generated_source_files: ``.java`` files created by the converter.
        build_fragment_path: ``pom.xml.wsdl2rest`` if present after the run.
        returncode: Converter exit status.
        stdout: Captured standard output.
        stderr: Captured standard error.
    """
    generated_source_files: set = field(default_factory=set)
    build_fragment_path: Optional[Path] = None
    returncode: int = 0
    stdout: str = ""
    stderr: str = ""
