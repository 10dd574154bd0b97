"""CLI entry point, prompting, and project generation.

Wires together validation, templating, the wsdl2rest converter and pom.xml
reconciliation to execute the full scaffolding pipeline.
"""

import argparse
import sys
from pathlib import Path
from typing import Callable, Optional

from .artifact_locator import default_search_root, find_wsdl2rest_jar
from .errors import (
    ArtifactNotFound,
    IncompatibleDSLSelection,
    InvalidCamelVersion,
    InvalidPackageName,
    InvalidProjectName,
    ScaffoldError,
)
from .models import (
    CAMEL_DSLS,
    DEFAULT_CAMEL_VERSION,
    DEFAULT_OUT_DIRECTORY,
    ConverterOptions,
    ConversionResult,
    ScaffoldRequest,
)
from .pom_merger import reconcile_build_fragment
from .project_templates import project_files
from .validators import (
    validate_camel_dsl,
    validate_camel_version,
    validate_package,
    validate_project_name,
)
from .wsdl2rest_runner import build_wsdl2rest_command, invoke_converter, java_executable

# key=value argument names → ScaffoldRequest field names.
KEY_ALIASES = {
    "appname": "name",
    "name": "name",
    "camelVersion": "camel_version",
    "camelDSL": "camel_dsl",
    "package": "package",
    "wsdl": "wsdl",
    "outdirectory": "out_directory",
    "jaxrs": "jaxrs_url",
    "jaxws": "jaxws_url",
}

ANSWER_FIELDS = (
    "name", "camel_version", "camel_dsl", "package",
    "wsdl", "out_directory", "jaxws_url", "jaxrs_url",
)

DEFAULT_TIMEOUT = 300


def parse_args(argv=None) -> argparse.Namespace:
    """Parse flags and ``key=value`` tokens into a namespace.

    Flags win over tokens when both give the same answer.

    Args:
        argv: Argument list; defaults to ``sys.argv[1:]``.

    Returns:
        The parsed namespace, with one attribute per answer field.
    """
    parser = argparse.ArgumentParser(
        description="Generate an Apache Camel project, optionally with wsdl2rest REST endpoints"
    )
    parser.add_argument(
        "assignments", nargs="*", metavar="key=value",
        help=f"Answers as key=value tokens ({', '.join(sorted(set(KEY_ALIASES)))})",
    )
    parser.add_argument("--name", help="Project name (Maven artifactId)")
    parser.add_argument("--package", help="Java package (Maven groupId)")
    parser.add_argument("--camel-version", dest="camel_version", help=f"Camel version (default: {DEFAULT_CAMEL_VERSION})")
    parser.add_argument("--camel-dsl", dest="camel_dsl", choices=CAMEL_DSLS, help="Camel DSL (default: spring)")
    parser.add_argument("--wsdl2rest", action="store_true", help="Generate REST endpoints from a WSDL with wsdl2rest")
    parser.add_argument("--wsdl", help="WSDL path or URL for wsdl2rest")
    parser.add_argument("--outdirectory", dest="out_directory", help=f"Output directory for generated sources (default: {DEFAULT_OUT_DIRECTORY})")
    parser.add_argument("--jaxws", dest="jaxws_url", help="JAX-WS endpoint address override")
    parser.add_argument("--jaxrs", dest="jaxrs_url", help="JAX-RS endpoint address override")
    parser.add_argument("--debug", action="store_true", help="Show the wsdl2rest command and its output")
    parser.add_argument("--output", "-o", type=Path, default=None, help="Project directory (default: current directory)")
    parser.add_argument("--dry-run", "-n", action="store_true", help="Print output without writing files")
    parser.add_argument("--no-prompt", action="store_true", help="Never prompt; use defaults for missing answers")
    parser.add_argument("--wsdl2rest-dir", type=Path, default=None, help="Directory searched for the wsdl2rest fat jar")
    parser.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT, help="Seconds to wait for wsdl2rest")
    args = parser.parse_args(argv)

    for token in args.assignments:
        key, sep, value = token.partition("=")
        if not sep or key not in KEY_ALIASES:
            parser.error(f"unrecognized argument '{token}' (expected key=value with key in {', '.join(KEY_ALIASES)})")
        dest = KEY_ALIASES[key]
        if getattr(args, dest) is None:
            setattr(args, dest, value)
    return args


def answers_from_args(args: argparse.Namespace) -> dict:
    """Collect the answer fields that were given on the command line."""
    return {f: getattr(args, f) for f in ANSWER_FIELDS if getattr(args, f, None) is not None}


def _default_package(name: str) -> str:
    segment = "".join(c for c in name.lower() if c.isalnum() or c == "_")
    if not segment or segment[0].isdigit():
        segment = f"_{segment}"
    return f"com.{segment}"


def default_answers(answers: dict, wsdl2rest: bool, output_path: Path) -> dict:
    """Fill in defaults for every missing answer without asking."""
    result = dict(answers)
    result.setdefault("name", output_path.resolve().name or "camel-project")
    result.setdefault("camel_version", DEFAULT_CAMEL_VERSION)
    result.setdefault("camel_dsl", "spring")
    result.setdefault("package", _default_package(result["name"]))
    if wsdl2rest:
        result.setdefault("out_directory", DEFAULT_OUT_DIRECTORY)
    return result


def _ask(
    question: str,
    default: Optional[str],
    input_fn: Callable[[str], str],
    check: Optional[Callable[[str], Optional[str]]] = None,
) -> Optional[str]:
    """Ask until the answer passes ``check`` (which returns an error message or ``None``)."""
    suffix = f" [{default}]" if default else ""
    while True:
        answer = input_fn(f"? {question}{suffix}: ").strip() or default
        problem = check(answer) if check else None
        if problem is None:
            return answer
        print(f"  {problem}")


def prompt_for_missing(
    answers: dict,
    wsdl2rest: bool,
    output_path: Path,
    input_fn: Callable[[str], str] = input,
) -> dict:
    """Interactively ask for every answer not given on the command line.

    Invalid answers are reported and asked again.

    Args:
        answers: Answers already known.
        wsdl2rest: Whether the wsdl2rest questions should be asked too.
        output_path: Project directory, used to derive the default name.
        input_fn: Function reading a line from the user.

    Returns:
        A new dict with every required answer present.
    """
    result = dict(answers)

    if "name" not in result:
        result["name"] = _ask(
            "Your Camel project name", output_path.resolve().name, input_fn,
            lambda a: None if validate_project_name(a) else f"'{a}' is not a valid project name.",
        )
    if "camel_version" not in result:
        result["camel_version"] = _ask(
            "Your Camel version", DEFAULT_CAMEL_VERSION, input_fn,
            lambda a: None if validate_camel_version(a) else f"'{a}' is not a valid Camel version.",
        )
    if "camel_dsl" not in result:
        result["camel_dsl"] = _ask(
            f"Camel DSL type ({', '.join(CAMEL_DSLS)})", "spring", input_fn,
            lambda a: validate_camel_dsl(a, wsdl2rest).message,
        )
    if "package" not in result:
        result["package"] = _ask(
            "Package name", _default_package(result["name"]), input_fn,
            lambda a: None if validate_package(a) else f"'{a}' is not a valid Java package name.",
        )

    if wsdl2rest:
        if "wsdl" not in result:
            result["wsdl"] = _ask(
                "URL or path to the WSDL", None, input_fn,
                lambda a: None if a else "A WSDL path or URL is required.",
            )
        if "out_directory" not in result:
            result["out_directory"] = _ask("Output directory for generated Java files", DEFAULT_OUT_DIRECTORY, input_fn)
        if "jaxws_url" not in result:
            result["jaxws_url"] = _ask("Address of the running JAX-WS service (optional)", None, input_fn)
        if "jaxrs_url" not in result:
            result["jaxrs_url"] = _ask("Address for the generated JAX-RS endpoint (optional)", None, input_fn)
    return result


def build_request(answers: dict, wsdl2rest: bool = False, debug: bool = False) -> ScaffoldRequest:
    """Create the immutable request for one run from collected answers.

    Blank optional answers are dropped; a blank name or package is kept so
    ``validate_request`` reports it.
    """
    fields = {f: answers[f] for f in ANSWER_FIELDS if answers.get(f)}
    fields.setdefault("name", answers.get("name") or "")
    fields.setdefault("package", answers.get("package") or "")
    return ScaffoldRequest(wsdl2rest=wsdl2rest, debug=debug, **fields)


def validate_request(request: ScaffoldRequest):
    """Reject a request before any file is written.

    Raises:
        InvalidProjectName: The name is not a legal Maven artifactId.
        InvalidPackageName: The package is not a legal Java package.
        InvalidCamelVersion: The Camel version is malformed.
        IncompatibleDSLSelection: The DSL cannot be used (with wsdl2rest).
        ScaffoldError: wsdl2rest was requested without a WSDL.
    """
    if not validate_project_name(request.name):
        raise InvalidProjectName(request.name)
    if not validate_package(request.package):
        raise InvalidPackageName(request.package)
    if not validate_camel_version(request.camel_version):
        raise InvalidCamelVersion(request.camel_version)
    dsl_check = validate_camel_dsl(request.camel_dsl, request.wsdl2rest)
    if not dsl_check.valid:
        raise IncompatibleDSLSelection(dsl_check.message)
    if request.wsdl2rest and not request.wsdl:
        raise ScaffoldError("wsdl2rest requires a WSDL path or URL")


def _resolve_out_directory(request: ScaffoldRequest, output_path: Path) -> Path:
    out_dir = Path(request.out_directory or DEFAULT_OUT_DIRECTORY)
    return out_dir if out_dir.is_absolute() else output_path / out_dir


def generate(
    request: ScaffoldRequest,
    output_path: Path,
    dry_run: bool = False,
    executor=None,
    wsdl2rest_dir: Optional[Path] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> Optional[ConversionResult]:
    """Run the full scaffolding pipeline.

    Validates the request, locates the wsdl2rest jar (when requested), writes
    the templated project files, runs the converter and merges its build
    fragment into pom.xml. With ``dry_run`` the files and the converter
    command are printed instead.

    Args:
        request: The scaffold request.
        output_path: Project directory to write into.
        dry_run: If ``True``, print instead of writing and do not run wsdl2rest.
        executor: Command executor for the converter (see ``invoke_converter``).
        wsdl2rest_dir: Directory searched for the jar; defaults to the bundled one.
        timeout: Seconds to wait for the converter.

    Returns:
        The ConversionResult of the wsdl2rest run, or ``None`` when wsdl2rest
        was not requested or this was a dry run.

    Raises:
        ScaffoldError: Any validation, lookup, conversion or merge failure.
    """
    validate_request(request)
    output_path = Path(output_path)

    jar = None
    if request.wsdl2rest:
        search_root = Path(wsdl2rest_dir) if wsdl2rest_dir else default_search_root()
        jar = find_wsdl2rest_jar(search_root)
        if jar is None:
            raise ArtifactNotFound(search_root)

    files = project_files(request)
    out_dir = _resolve_out_directory(request, output_path)
    options = ConverterOptions(
        camel_dsl=request.camel_dsl,
        context_file=str(output_path / request.context_file) if request.context_file else None,
        jaxws_url=request.jaxws_url,
        jaxrs_url=request.jaxrs_url,
        debug=request.debug,
        timeout=timeout,
        java=java_executable(),
    )

    if dry_run:
        for rel_path, content in files.items():
            print("=" * 60)
            print(rel_path)
            print("=" * 60)
            print(content)
        if jar:
            print("=" * 60)
            print("wsdl2rest command")
            print("=" * 60)
            print(" ".join(build_wsdl2rest_command(jar, request.wsdl, out_dir, options)))
        return None

    for rel_path, content in files.items():
        _write(output_path / rel_path, content)

    result = None
    if request.wsdl2rest:
        print(f"\nRunning wsdl2rest ({jar.name}) on {request.wsdl}")
        result = invoke_converter(jar, request.wsdl, out_dir, options, executor, project_root=output_path)
        for source in sorted(result.generated_source_files):
            print(f"  ✓ {source}")
        if not result.generated_source_files:
            print(f"WARNING: wsdl2rest generated no Java sources in {out_dir}", file=sys.stderr)

    reconcile_build_fragment(output_path)

    print(f"\n✅ Camel project '{request.name}' generated in: {output_path}")
    print("\n⚠️  Next steps:")
    print("  1. Review the generated route definition")
    print("  2. Run: mvn clean install")
    if request.camel_dsl == "java":
        print("  3. Run: mvn exec:java")
    else:
        print("  3. Run: mvn camel:run")
    return result


def _write(path: Path, content: str):
    """Write content to a file, creating parent directories as needed.

    Args:
        path: Filesystem path to write to.
        content: File content string (UTF-8 encoded).
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    print(f"  ✓ {path}")


def main(argv=None):
    """CLI entry point. Parses arguments, asks for missing answers and delegates to ``generate()``."""
    args = parse_args(argv)
    output_path = args.output or Path.cwd()
    answers = answers_from_args(args)
    if args.no_prompt:
        answers = default_answers(answers, args.wsdl2rest, output_path)
    else:
        answers = prompt_for_missing(answers, args.wsdl2rest, output_path)

    try:
        request = build_request(answers, wsdl2rest=args.wsdl2rest, debug=args.debug)
        generate(
            request, output_path,
            dry_run=args.dry_run,
            wsdl2rest_dir=args.wsdl2rest_dir,
            timeout=args.timeout,
        )
    except ScaffoldError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)
