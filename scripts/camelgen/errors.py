"""Errors raised by the generator pipeline.

Every error is fatal to the run; the CLI reports the message and exits 1.
"""

from typing import Optional, Sequence


class ScaffoldError(Exception):
    """Base class for all generator failures."""


class InvalidPackageName(ScaffoldError):
    def __init__(self, package: str):
        super().__init__(
            f"'{package}' is not a valid Java package name "
            "(dot-separated identifiers, no reserved words)"
        )
        self.package = package


class InvalidProjectName(ScaffoldError):
    def __init__(self, name: str):
        super().__init__(
            f"'{name}' is not a valid project name "
            "(letters, digits, '_', '-' and '.' only)"
        )
        self.name = name


class IncompatibleDSLSelection(ScaffoldError):
    pass


class InvalidCamelVersion(ScaffoldError):
    def __init__(self, version: str):
        super().__init__(f"'{version}' is not a valid Camel version (expected e.g. 2.22.2)")
        self.version = version


class ArtifactNotFound(ScaffoldError):
    def __init__(self, search_root):
        super().__init__(f"No wsdl2rest-impl-fatjar-<version>.jar found under {search_root}")
        self.search_root = search_root


class ConverterExecutionFailed(ScaffoldError):
    """The wsdl2rest converter could not be started or exited non-zero.

    Attributes:
        returncode: Exit status, or ``None`` if the process never ran to completion.
        stderr: Captured standard error (may be empty).
        command: The command line that was executed.
    """

    def __init__(
        self,
        message: str,
        returncode: Optional[int] = None,
        stderr: str = "",
        command: Optional[Sequence[str]] = None,
    ):
        detail = message
        if returncode is not None:
            detail += f" (exit code {returncode})"
        if stderr:
            detail += f"\n{stderr.strip()}"
        super().__init__(detail)
        self.returncode = returncode
        self.stderr = stderr
        self.command = list(command) if command else []


class FragmentMergeFailed(ScaffoldError):
    pass
