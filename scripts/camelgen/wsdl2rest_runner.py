"""Running the external wsdl2rest converter.

Builds the ``java -jar wsdl2rest-impl-fatjar-<version>.jar ...`` command line,
runs it through a command executor and collects what it generated. The
executor is injectable so the converter can be replaced in tests.
"""

import os
import subprocess
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

from .errors import ConverterExecutionFailed
from .models import WSDL2REST_FRAGMENT, ConversionResult, ConverterOptions

URL_SCHEMES = ("http", "https", "file")


class SubprocessExecutor:
    """Runs commands with :func:`subprocess.run`, capturing output as text."""

    def run(self, command: list, cwd=None, timeout: Optional[float] = None) -> subprocess.CompletedProcess:
        return subprocess.run(
            command,
            cwd=str(cwd) if cwd else None,
            capture_output=True,
            text=True,
            errors="replace",
            timeout=timeout,
        )


def java_executable() -> str:
    """Return ``$JAVA_HOME/bin/java`` when JAVA_HOME is set, else ``java``."""
    java_home = os.environ.get("JAVA_HOME")
    if java_home:
        return str(Path(java_home) / "bin" / "java")
    return "java"


def is_url(source: str) -> bool:
    """Check whether a WSDL source is a URL rather than a filesystem path."""
    return urlparse(source).scheme.lower() in URL_SCHEMES


def to_wsdl_url(source: str) -> str:
    """Normalize a WSDL source into the URL handed to the converter.

    URLs are passed through untouched; the converter fetches them itself.
    Filesystem paths become absolute ``file://`` URIs.

        http://localhost:3000/hello?wsdl → http://localhost:3000/hello?wsdl
        test/address.wsdl                → file:///home/me/project/test/address.wsdl
    """
    if is_url(source):
        return source
    return Path(source).expanduser().resolve().as_uri()


def build_wsdl2rest_command(jar_path, wsdl: str, out_directory, options: ConverterOptions) -> list:
    """Build the converter command line.

    Args:
        jar_path: Path to the wsdl2rest fat jar.
        wsdl: WSDL path or URL.
        out_directory: Directory the converter writes Java sources to.
        options: Route context file, DSL and endpoint overrides.

    Returns:
        The argument list, starting with the Java executable.
    """
    command = [
        options.java, "-jar", str(jar_path),
        "--wsdl", to_wsdl_url(wsdl),
        "--out", str(out_directory),
    ]
    if options.context_file:
        flag = "--blueprint-context" if options.camel_dsl == "blueprint" else "--camel-context"
        command += [flag, str(options.context_file)]
    if options.jaxrs_url:
        command += ["--jaxrs", options.jaxrs_url]
    if options.jaxws_url:
        command += ["--jaxws", options.jaxws_url]
    return command


def _java_sources(directory: Path) -> set:
    if not directory.is_dir():
        return set()
    return {p for p in directory.rglob("*.java") if p.is_file()}


def invoke_converter(
    jar_path,
    wsdl: str,
    out_directory,
    options: Optional[ConverterOptions] = None,
    executor=None,
    project_root=None,
) -> ConversionResult:
    """Run wsdl2rest and wait for it to finish.

    Args:
        jar_path: Path to the wsdl2rest fat jar.
        wsdl: WSDL path or URL. URLs are not fetched here.
        out_directory: Directory the converter writes Java sources to.
        options: Converter settings; defaults to :class:`ConverterOptions`.
        executor: Object with a ``run(command, cwd, timeout)`` method returning
            a ``CompletedProcess``. Defaults to :class:`SubprocessExecutor`.
        project_root: Working directory for the converter, and where the
            ``pom.xml.wsdl2rest`` fragment is looked for afterwards.

    Returns:
        A ConversionResult listing the newly generated ``.java`` files.

    Raises:
        ConverterExecutionFailed: The jar is missing, the process could not be
            started, timed out, or exited non-zero.
    """
    options = options or ConverterOptions()
    executor = executor or SubprocessExecutor()
    out_dir = Path(out_directory)
    command = build_wsdl2rest_command(jar_path, wsdl, out_dir, options)

    if not Path(jar_path).is_file():
        raise ConverterExecutionFailed(f"wsdl2rest jar not found: {jar_path}", command=command)

    if options.debug:
        print(f"  $ {' '.join(command)}")

    before = _java_sources(out_dir)
    try:
        completed = executor.run(command, cwd=project_root, timeout=options.timeout)
    except subprocess.TimeoutExpired as e:
        raise ConverterExecutionFailed(
            f"wsdl2rest did not finish within {options.timeout} seconds", command=command
        ) from e
    except OSError as e:
        raise ConverterExecutionFailed(f"Could not start wsdl2rest: {e}", command=command) from e

    stdout = completed.stdout or ""
    stderr = completed.stderr or ""
    if options.debug:
        if stdout:
            print(stdout.rstrip())
        if stderr:
            print(stderr.rstrip())

    if completed.returncode != 0:
        raise ConverterExecutionFailed(
            "wsdl2rest failed", returncode=completed.returncode, stderr=stderr, command=command
        )

    fragment = None
    if project_root is not None:
        candidate = Path(project_root) / WSDL2REST_FRAGMENT
        if candidate.exists():
            fragment = candidate

    return ConversionResult(
        generated_source_files=_java_sources(out_dir) - before,
        build_fragment_path=fragment,
        returncode=completed.returncode,
        stdout=stdout,
        stderr=stderr,
    )
