"""Merging the wsdl2rest build fragment into pom.xml.

wsdl2rest projects need extra dependencies (CXF, Jetty, Jackson) which are
stamped into ``pom.xml.wsdl2rest``. Reconciliation folds the fragment's
``<properties>``, ``<dependencies>`` and ``<build><plugins>`` into the
project's pom.xml and removes the fragment.
"""

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional

from .errors import FragmentMergeFailed
from .models import WSDL2REST_FRAGMENT

# XML namespace used by Maven POM files (POM model version 4.0.0).
POM_NS = "http://maven.apache.org/POM/4.0.0"
NS = {"m": POM_NS}

ET.register_namespace("", POM_NS)
ET.register_namespace("xsi", "http://www.w3.org/2001/XMLSchema-instance")


def _local(tag: str) -> str:
    return tag.split("}")[-1] if "}" in tag else tag


def _namespace(el) -> Optional[str]:
    if el.tag.startswith("{"):
        return el.tag[1:].split("}")[0]
    return None


def _find(el, tag, ns=NS):
    """Find a direct child XML element, trying with and without the Maven namespace.

    Args:
        el: Parent XML element to search within.
        tag: Tag name to look for (without namespace prefix).
        ns: Namespace mapping (defaults to Maven POM 4.0.0).

    Returns:
        The first matching child element, or ``None`` if not found.
    """
    result = el.find(f"m:{tag}", ns)
    if result is not None:
        return result
    return el.find(tag)


def _findall(el, tag, ns=NS) -> list:
    return list(el.findall(f"m:{tag}", ns)) + list(el.findall(tag))


def _text(el, tag, ns=NS) -> Optional[str]:
    child = _find(el, tag, ns)
    if child is not None and child.text:
        return child.text.strip()
    return None


def _retag(el, namespace: Optional[str]):
    """Move an element tree into ``namespace`` so it matches the target pom."""
    for node in el.iter():
        if not isinstance(node.tag, str):
            continue  # comments
        local = _local(node.tag)
        node.tag = f"{{{namespace}}}{local}" if namespace else local
    return el


def _child(parent, tag: str, namespace: Optional[str]):
    """Return the named child of ``parent``, creating it if absent."""
    existing = _find(parent, tag)
    if existing is not None:
        return existing
    return ET.SubElement(parent, f"{{{namespace}}}{tag}" if namespace else tag)


def _coordinate(el, default_group: str = "") -> tuple:
    return (_text(el, "groupId") or default_group, _text(el, "artifactId") or "")


def parse_xml(path: Path) -> ET.ElementTree:
    """Parse an XML file keeping comments, so rewriting pom.xml does not drop them."""
    parser = ET.XMLParser(target=ET.TreeBuilder(insert_comments=True))
    return ET.parse(path, parser)


def merge_fragment(pom_root, fragment_root) -> int:
    """Merge a fragment element tree into a parsed pom.xml root.

    Entries already present in the pom are left alone: properties match by
    name, dependencies and plugins by ``groupId:artifactId``.

    Args:
        pom_root: The ``<project>`` element of pom.xml.
        fragment_root: The fragment's root, either ``<project>`` or a bare
            ``<dependencies>`` element.

    Returns:
        Number of entries added to the pom.
    """
    namespace = _namespace(pom_root)
    added = 0

    if _local(fragment_root.tag) == "dependencies":
        frag_props, frag_deps, frag_plugins = None, fragment_root, None
    else:
        frag_props = _find(fragment_root, "properties")
        frag_deps = _find(fragment_root, "dependencies")
        frag_plugins = None
        frag_build = _find(fragment_root, "build")
        if frag_build is not None:
            frag_plugins = _find(frag_build, "plugins")

    if frag_props is not None and len(frag_props):
        props = _child(pom_root, "properties", namespace)
        existing = {_local(p.tag) for p in props if isinstance(p.tag, str)}
        for prop in frag_props:
            if not isinstance(prop.tag, str) or _local(prop.tag) in existing:
                continue
            props.append(_retag(prop, namespace))
            existing.add(_local(prop.tag))
            added += 1

    if frag_deps is not None:
        deps = _child(pom_root, "dependencies", namespace)
        existing = {_coordinate(d) for d in _findall(deps, "dependency")}
        for dep in _findall(frag_deps, "dependency"):
            coord = _coordinate(dep)
            if coord in existing:
                continue
            deps.append(_retag(dep, namespace))
            existing.add(coord)
            added += 1

    if frag_plugins is not None:
        plugins = _child(_child(pom_root, "build", namespace), "plugins", namespace)
        default_group = "org.apache.maven.plugins"
        existing = {_coordinate(p, default_group) for p in _findall(plugins, "plugin")}
        for plugin in _findall(frag_plugins, "plugin"):
            coord = _coordinate(plugin, default_group)
            if coord in existing:
                continue
            plugins.append(_retag(plugin, namespace))
            existing.add(coord)
            added += 1

    return added


def reconcile_build_fragment(project_root) -> bool:
    """Merge ``pom.xml.wsdl2rest`` into ``pom.xml`` and delete the fragment.

    Safe to call unconditionally: without a fragment nothing happens, and a
    second call after a successful merge is a no-op.

    Args:
        project_root: Directory holding pom.xml.

    Returns:
        ``True`` if a fragment was merged, ``False`` if there was none.

    Raises:
        FragmentMergeFailed: The fragment or pom.xml is missing or malformed.
            The fragment is kept so its dependencies are not lost.
    """
    root = Path(project_root)
    fragment_path = root / WSDL2REST_FRAGMENT
    if not fragment_path.exists():
        return False

    pom_path = root / "pom.xml"
    if not pom_path.exists():
        raise FragmentMergeFailed(f"Cannot merge {fragment_path}: no pom.xml in {root}")

    try:
        fragment = parse_xml(fragment_path)
    except (ET.ParseError, OSError) as e:
        raise FragmentMergeFailed(f"Cannot read build fragment {fragment_path}: {e}") from e
    try:
        pom = parse_xml(pom_path)
    except (ET.ParseError, OSError) as e:
        raise FragmentMergeFailed(f"Cannot read {pom_path}: {e}") from e

    added = merge_fragment(pom.getroot(), fragment.getroot())
    ET.indent(pom, space="    ")
    try:
        pom.write(pom_path, encoding="UTF-8", xml_declaration=True)
    except OSError as e:
        raise FragmentMergeFailed(f"Cannot write {pom_path}: {e}") from e
    fragment_path.unlink()
    print(f"  ✓ {pom_path} (merged {added} entries from {WSDL2REST_FRAGMENT})")
    return True
