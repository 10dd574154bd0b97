"""Locating the bundled wsdl2rest converter jar.

The wsdl2rest build produces a repackaged fat jar
(``wsdl2rest-impl-fatjar-<version>.jar``) next to the pre-repackaging backup
(``...jar.original``). Only the fat jar is runnable.
"""

import os
import re
from pathlib import Path
from typing import Optional

JAR_PREFIX = "wsdl2rest-impl-fatjar-"
DECOY_SUFFIX = ".original"

JAR_NAME_RE = re.compile(rf"^{re.escape(JAR_PREFIX)}(?P<version>\d[A-Za-z0-9_.-]*)\.jar$")

# Jar search root shipped beside the package; CAMELGEN_WSDL2REST_DIR overrides it.
BUNDLED_WSDL2REST_DIR = Path(__file__).resolve().parent / "wsdl2rest" / "target"


def default_search_root() -> Path:
    """Return the directory searched for the converter jar when none is given."""
    override = os.environ.get("CAMELGEN_WSDL2REST_DIR")
    return Path(override) if override else BUNDLED_WSDL2REST_DIR


def is_wsdl2rest_jar(file_name: str) -> bool:
    """Check whether a file name is an eligible fat jar (never a ``.original`` decoy)."""
    if file_name.endswith(DECOY_SUFFIX):
        return False
    return JAR_NAME_RE.match(file_name) is not None


def version_key(version: str) -> tuple:
    """Sort key comparing version strings part by part, numerically where possible.

    ``0.10.0`` sorts above ``0.9.1``; at the same position a numeric part
    sorts above a qualifier such as ``SNAPSHOT``.
    """
    key = []
    for part in re.split(r"[.\-_]", version):
        if part.isdigit():
            key.append((1, int(part), ""))
        else:
            key.append((0, 0, part))
    return tuple(key)


def find_wsdl2rest_jar(search_root) -> Optional[Path]:
    """Recursively search ``search_root`` for the wsdl2rest fat jar.

    When several versions are present the highest version wins; identical
    versions (in different subdirectories) fall back to the greatest path so
    the choice is deterministic.

    Args:
        search_root: Directory to scan.

    Returns:
        Path to the selected jar, or ``None`` if the directory does not exist
        or holds no eligible jar.
    """
    root = Path(search_root)
    if not root.is_dir():
        return None

    candidates = []
    for path in root.rglob(f"{JAR_PREFIX}*"):
        if not path.is_file() or not is_wsdl2rest_jar(path.name):
            continue
        version = JAR_NAME_RE.match(path.name).group("version")
        candidates.append((version_key(version), str(path), path))

    if not candidates:
        return None
    candidates.sort(key=lambda c: (c[0], c[1]))
    return candidates[-1][2]
