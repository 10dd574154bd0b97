"""Tests for project_templates.py — pom.xml, README and route definition content."""

import dataclasses
import xml.etree.ElementTree as ET

from camelgen.pom_merger import NS
from camelgen.project_templates import (
    generate_blueprint_xml,
    generate_camel_context_xml,
    generate_camel_route_java,
    generate_launcher_java,
    generate_pom_xml,
    generate_readme,
    generate_wsdl2rest_pom_fragment,
    project_files,
)


def _pom(request):
    return ET.fromstring(generate_pom_xml(request))


class TestGeneratePomXml:
    def test_coordinates(self, spring_request):
        pom = generate_pom_xml(spring_request)
        assert "<groupId>com.generator.mock</groupId>" in pom
        assert "<artifactId>MyAppMock</artifactId>" in pom

    def test_camel_version_property(self, spring_request):
        root = _pom(dataclasses.replace(spring_request, camel_version="2.21.0"))
        assert root.find("m:properties/m:camel.version", NS).text == "2.21.0"

    def test_spring_dependencies(self, spring_request):
        root = _pom(spring_request)
        ids = [el.text for el in root.findall("m:dependencies/m:dependency/m:artifactId", NS)]
        assert "camel-core" in ids
        assert "camel-spring" in ids
        assert "camel-test-spring" in ids
        assert root.find("m:packaging", NS).text == "jar"

    def test_blueprint_is_bundle(self, blueprint_request):
        root = _pom(blueprint_request)
        assert root.find("m:packaging", NS).text == "bundle"
        plugins = [el.text for el in root.findall("m:build/m:plugins/m:plugin/m:artifactId", NS)]
        assert "maven-bundle-plugin" in plugins
        assert "<useBlueprint>true</useBlueprint>" in generate_pom_xml(blueprint_request)

    def test_java_has_exec_plugin(self, java_request):
        pom = generate_pom_xml(java_request)
        assert "<mainClass>com.generator.mock.javadsl.routes.Launcher</mainClass>" in pom
        assert "camel-spring" not in pom
        assert "camel-maven-plugin" not in pom

    def test_well_formed_for_every_dsl(self, spring_request, blueprint_request, java_request):
        for request in (spring_request, blueprint_request, java_request):
            assert _pom(request).tag == "{http://maven.apache.org/POM/4.0.0}project"


class TestWsdl2RestFragment:
    def test_cxf_dependencies(self, spring_request):
        root = ET.fromstring(generate_wsdl2rest_pom_fragment(spring_request))
        ids = [el.text for el in root.findall("m:dependencies/m:dependency/m:artifactId", NS)]
        assert "camel-cxf" in ids
        assert "camel-jetty" in ids
        assert "cxf-rt-transports-http-jetty" in ids

    def test_blueprint_has_no_spring_modules(self, blueprint_request):
        assert "camel-spring" not in generate_wsdl2rest_pom_fragment(blueprint_request)


class TestRouteDefinitions:
    def test_camel_context_is_spring_xml(self, spring_request):
        root = ET.fromstring(generate_camel_context_xml(spring_request))
        assert root.tag == "{http://www.springframework.org/schema/beans}beans"
        assert 'id="MyAppMock-context"' in generate_camel_context_xml(spring_request)

    def test_blueprint_xml(self, blueprint_request):
        root = ET.fromstring(generate_blueprint_xml(blueprint_request))
        assert root.tag == "{http://www.osgi.org/xmlns/blueprint/v1.0.0}blueprint"

    def test_camel_route_java(self, java_request):
        source = generate_camel_route_java(java_request)
        assert source.startswith("package com.generator.mock.javadsl.routes;")
        assert "public class CamelRoute extends RouteBuilder" in source
        assert "${body}" in source

    def test_launcher_java(self, java_request):
        source = generate_launcher_java(java_request)
        assert "package com.generator.mock.javadsl.routes;" in source
        assert "main.addRouteBuilder(new CamelRoute());" in source


class TestReadme:
    def test_spring_run_instructions(self, spring_request):
        readme = generate_readme(spring_request)
        assert readme.startswith("# MyAppMock")
        assert "mvn camel:run" in readme

    def test_java_run_instructions(self, java_request):
        assert "mvn exec:java" in generate_readme(java_request)

    def test_wsdl2rest_section(self, spring_request):
        request = dataclasses.replace(
            spring_request, wsdl2rest=True, wsdl="address.wsdl", jaxrs_url="http://localhost:8081/rest"
        )
        readme = generate_readme(request)
        assert "## wsdl2rest" in readme
        assert "address.wsdl" in readme
        assert "http://localhost:8081/rest" in readme


class TestProjectFiles:
    def test_spring_layout(self, spring_request):
        files = project_files(spring_request)
        assert list(files)[:2] == ["pom.xml", "README.md"]
        assert "src/main/resources/META-INF/spring/camel-context.xml" in files
        assert "pom.xml.wsdl2rest" not in files

    def test_blueprint_layout(self, blueprint_request):
        assert "src/main/resources/OSGI-INF/blueprint/blueprint.xml" in project_files(blueprint_request)

    def test_java_layout(self, java_request):
        files = project_files(java_request)
        assert "src/main/java/com/generator/mock/javadsl/routes/CamelRoute.java" in files
        assert "src/main/java/com/generator/mock/javadsl/routes/Launcher.java" in files
        assert not any(path.endswith(".xml") and "resources" in path for path in files)

    def test_wsdl2rest_adds_fragment(self, spring_request):
        request = dataclasses.replace(spring_request, wsdl2rest=True, wsdl="address.wsdl")
        assert "pom.xml.wsdl2rest" in project_files(request)
