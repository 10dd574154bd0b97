"""Shared test fixtures for the Camel project generator test suite."""

import subprocess
import textwrap
import threading
import xml.etree.ElementTree as ET
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from urllib.parse import urlparse
from urllib.request import ProxyHandler, build_opener

import pytest

from camelgen.models import ScaffoldRequest

RESOURCES = Path(__file__).parent / "resources"

WSDL_NS = "http://schemas.xmlsoap.org/wsdl/"
XSD_NS = "http://www.w3.org/2001/XMLSchema"


def namespace_to_package(namespace: str) -> str:
    """JAXB-style package for a namespace URI (reversed host, then path)."""
    parsed = urlparse(namespace)
    parts = list(reversed(parsed.hostname.split("."))) if parsed.hostname else []
    parts += [p for p in parsed.path.split("/") if p]
    return ".".join(p.lower().replace("-", "_") for p in parts)


class FakeWsdl2Rest:
    """Command executor standing in for ``java -jar wsdl2rest-impl-fatjar.jar``.

    Reads the WSDL from the ``--wsdl`` URL, writes one Java class per
    ``complexType`` and ``portType`` under ``--out`` and a route definition to
    the context file. Every command is recorded in ``commands``.
    """

    def __init__(self, returncode: int = 0, stderr: str = "", fragment: str = None):
        self.returncode = returncode
        self.stderr = stderr
        self.fragment = fragment
        self.commands = []
        self.cwds = []

    @staticmethod
    def option(command, flag):
        return command[command.index(flag) + 1] if flag in command else None

    def run(self, command, cwd=None, timeout=None):
        self.commands.append(list(command))
        self.cwds.append(cwd)
        if self.returncode != 0:
            return subprocess.CompletedProcess(command, self.returncode, "", self.stderr)

        opener = build_opener(ProxyHandler({}))
        with opener.open(self.option(command, "--wsdl")) as response:
            definitions = ET.fromstring(response.read())

        out_dir = Path(self.option(command, "--out"))
        package = namespace_to_package(definitions.get("targetNamespace"))
        names = [el.get("name") for el in definitions.iter(f"{{{XSD_NS}}}complexType")]
        names += [el.get("name") for el in definitions.iter(f"{{{WSDL_NS}}}portType")]
        package_dir = out_dir / package.replace(".", "/")
        package_dir.mkdir(parents=True, exist_ok=True)
        for name in names:
            (package_dir / f"{name}.java").write_text(
                f"package {package};\n\npublic class {name} {{\n}}\n", encoding="utf-8"
            )

        context = self.option(command, "--camel-context") or self.option(command, "--blueprint-context")
        if context:
            Path(context).parent.mkdir(parents=True, exist_ok=True)
            Path(context).write_text("<!-- generated by wsdl2rest -->\n", encoding="utf-8")

        if self.fragment is not None and cwd is not None:
            (Path(cwd) / "pom.xml.wsdl2rest").write_text(self.fragment, encoding="utf-8")

        return subprocess.CompletedProcess(command, 0, f"Generated {len(names)} classes\n", "")


@pytest.fixture
def fake_converter():
    return FakeWsdl2Rest()


@pytest.fixture
def converter_factory():
    """Build a FakeWsdl2Rest with a custom exit code, stderr or pom fragment."""
    return FakeWsdl2Rest


@pytest.fixture
def jar_dir(tmp_path):
    """A wsdl2rest target directory holding the fat jar and its .original backup."""
    target = tmp_path / "wsdl2rest" / "target"
    target.mkdir(parents=True)
    (target / "wsdl2rest-impl-fatjar-0.1.3-SNAPSHOT.jar").write_bytes(b"PK")
    (target / "wsdl2rest-impl-fatjar-0.1.3-SNAPSHOT.jar.original").write_bytes(b"PK")
    return target


@pytest.fixture
def jar_path(jar_dir):
    return jar_dir / "wsdl2rest-impl-fatjar-0.1.3-SNAPSHOT.jar"


@pytest.fixture
def address_wsdl():
    return RESOURCES / "address.wsdl"


@pytest.fixture
def project_dir(tmp_path):
    project = tmp_path / "project"
    project.mkdir()
    return project


@pytest.fixture
def wsdl_server():
    """Serve helloworld.wsdl on localhost; yields the service URL."""
    wsdl = (RESOURCES / "helloworld.wsdl").read_bytes()

    class Handler(BaseHTTPRequestHandler):
        def do_GET(self):
            if self.path.startswith("/helloworldservice"):
                self.send_response(200)
                self.send_header("Content-Type", "text/xml")
                self.send_header("Content-Length", str(len(wsdl)))
                self.end_headers()
                self.wfile.write(wsdl)
            else:
                self.send_error(404)

        def log_message(self, format, *args):
            pass

    server = ThreadingHTTPServer(("127.0.0.1", 0), Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield f"http://127.0.0.1:{server.server_address[1]}/helloworldservice"
    finally:
        server.shutdown()
        server.server_close()


@pytest.fixture
def tmp_pom(project_dir):
    """Factory fixture that writes a pom.xml to the project directory and returns the path."""
    def _write(content: str) -> Path:
        pom = project_dir / "pom.xml"
        pom.write_text(textwrap.dedent(content), encoding="utf-8")
        return pom
    return _write


@pytest.fixture
def spring_request():
    return ScaffoldRequest(name="MyAppMock", package="com.generator.mock", camel_dsl="spring")


@pytest.fixture
def blueprint_request():
    return ScaffoldRequest(name="MyAppMockBP", package="com.generator.mock.bp", camel_dsl="blueprint")


@pytest.fixture
def java_request():
    return ScaffoldRequest(name="MyAppMockJava", package="com.generator.mock.javadsl", camel_dsl="java")
