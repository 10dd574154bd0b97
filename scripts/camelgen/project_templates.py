"""Project file templates.

Produces content for pom.xml, README.md, the DSL-specific route definition,
log4j2.properties and the wsdl2rest build fragment. All functions take a
ScaffoldRequest and return strings; nothing here touches the filesystem.
"""

from collections import OrderedDict

from .models import CONTEXT_FILES, WSDL2REST_FRAGMENT, ScaffoldRequest

LOG4J_VERSION = "2.11.1"
CXF_VERSION = "3.2.6"

# DSL → (camel module, camel test module)
DSL_MODULES = {
    "spring": ("camel-spring", "camel-test-spring"),
    "blueprint": ("camel-blueprint", "camel-test-blueprint"),
    "java": (None, "camel-test"),
}


def _dependency(group_id: str, artifact_id: str, version: str = None, scope: str = None) -> list:
    lines = ["        <dependency>"]
    lines.append(f"            <groupId>{group_id}</groupId>")
    lines.append(f"            <artifactId>{artifact_id}</artifactId>")
    if version:
        lines.append(f"            <version>{version}</version>")
    if scope:
        lines.append(f"            <scope>{scope}</scope>")
    lines.append("        </dependency>")
    return lines


def generate_pom_xml(request: ScaffoldRequest) -> str:
    """Generate the project's ``pom.xml``.

    Camel versions are managed through the ``camel-parent`` BOM. Blueprint
    projects are packaged as OSGi bundles with the maven-bundle-plugin; Java
    DSL projects get an exec-maven-plugin pointing at the generated Launcher.

    Args:
        request: The scaffold request.

    Returns:
        Complete ``pom.xml`` content.
    """
    dsl = request.camel_dsl
    camel_module, test_module = DSL_MODULES[dsl]
    packaging = "bundle" if dsl == "blueprint" else "jar"

    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        '<project xmlns="http://maven.apache.org/POM/4.0.0"',
        '         xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"',
        '         xsi:schemaLocation="http://maven.apache.org/POM/4.0.0 http://maven.apache.org/xsd/maven-4.0.0.xsd">',
        "    <modelVersion>4.0.0</modelVersion>",
        "",
        f"    <groupId>{request.package}</groupId>",
        f"    <artifactId>{request.name}</artifactId>",
        f"    <packaging>{packaging}</packaging>",
        "    <version>1.0.0-SNAPSHOT</version>",
        "",
        f"    <name>{request.name}</name>",
        f"    <description>Apache Camel {dsl} DSL project</description>",
        "",
        "    <properties>",
        "        <project.build.sourceEncoding>UTF-8</project.build.sourceEncoding>",
        "        <project.reporting.outputEncoding>UTF-8</project.reporting.outputEncoding>",
        "        <maven.compiler.source>1.8</maven.compiler.source>",
        "        <maven.compiler.target>1.8</maven.compiler.target>",
        f"        <camel.version>{request.camel_version}</camel.version>",
        f"        <log4j2.version>{LOG4J_VERSION}</log4j2.version>",
        "    </properties>",
        "",
        "    <dependencyManagement>",
        "        <dependencies>",
        "            <dependency>",
        "                <groupId>org.apache.camel</groupId>",
        "                <artifactId>camel-parent</artifactId>",
        "                <version>${camel.version}</version>",
        "                <scope>import</scope>",
        "                <type>pom</type>",
        "            </dependency>",
        "        </dependencies>",
        "    </dependencyManagement>",
        "",
        "    <dependencies>",
    ]
    lines += _dependency("org.apache.camel", "camel-core")
    if camel_module:
        lines += _dependency("org.apache.camel", camel_module)
    lines.append("")
    lines.append("        <!-- logging -->")
    lines += _dependency("org.apache.logging.log4j", "log4j-api", "${log4j2.version}", "runtime")
    lines += _dependency("org.apache.logging.log4j", "log4j-core", "${log4j2.version}", "runtime")
    lines += _dependency("org.apache.logging.log4j", "log4j-slf4j-impl", "${log4j2.version}", "runtime")
    lines.append("")
    lines.append("        <!-- testing -->")
    lines += _dependency("org.apache.camel", test_module, scope="test")
    lines += [
        "    </dependencies>",
        "",
        "    <build>",
        "        <defaultGoal>install</defaultGoal>",
        "        <plugins>",
    ]

    if dsl == "blueprint":
        lines += [
            "            <plugin>",
            "                <groupId>org.apache.felix</groupId>",
            "                <artifactId>maven-bundle-plugin</artifactId>",
            "                <version>3.5.1</version>",
            "                <extensions>true</extensions>",
            "                <configuration>",
            "                    <instructions>",
            "                        <Bundle-SymbolicName>${project.artifactId}</Bundle-SymbolicName>",
            "                        <Import-Package>*</Import-Package>",
            "                    </instructions>",
            "                </configuration>",
            "            </plugin>",
        ]

    if dsl == "java":
        lines += [
            "            <plugin>",
            "                <groupId>org.codehaus.mojo</groupId>",
            "                <artifactId>exec-maven-plugin</artifactId>",
            "                <version>1.6.0</version>",
            "                <configuration>",
            f"                    <mainClass>{request.package}.routes.Launcher</mainClass>",
            "                    <includePluginDependencies>false</includePluginDependencies>",
            "                </configuration>",
            "            </plugin>",
        ]
    else:
        lines += [
            "            <plugin>",
            "                <groupId>org.apache.camel</groupId>",
            "                <artifactId>camel-maven-plugin</artifactId>",
            "                <version>${camel.version}</version>",
        ]
        if dsl == "blueprint":
            lines += [
                "                <configuration>",
                "                    <useBlueprint>true</useBlueprint>",
                "                </configuration>",
            ]
        lines.append("            </plugin>")

    lines += [
        "        </plugins>",
        "    </build>",
        "</project>",
        "",
    ]
    return "\n".join(lines)


def generate_wsdl2rest_pom_fragment(request: ScaffoldRequest) -> str:
    """Generate ``pom.xml.wsdl2rest``, the dependencies wsdl2rest routes need.

    The generated REST-to-SOAP route uses a Jetty REST endpoint, Jackson
    binding and a CXF client for the JAX-WS service.
    """
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        '<project xmlns="http://maven.apache.org/POM/4.0.0">',
        "    <properties>",
        f"        <cxf.version>{CXF_VERSION}</cxf.version>",
        "    </properties>",
        "    <dependencies>",
    ]
    lines += _dependency("org.apache.camel", "camel-cxf")
    lines += _dependency("org.apache.camel", "camel-jetty")
    lines += _dependency("org.apache.camel", "camel-jackson")
    lines += _dependency("org.apache.cxf", "cxf-rt-transports-http-jetty", "${cxf.version}")
    if request.camel_dsl == "spring":
        lines += _dependency("org.apache.camel", "camel-spring-javaconfig")
    lines += [
        "    </dependencies>",
        "</project>",
        "",
    ]
    return "\n".join(lines)


def generate_camel_context_xml(request: ScaffoldRequest) -> str:
    """Generate the Spring XML route definition."""
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<beans xmlns="http://www.springframework.org/schema/beans"
       xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"
       xsi:schemaLocation="
         http://www.springframework.org/schema/beans http://www.springframework.org/schema/beans/spring-beans.xsd
         http://camel.apache.org/schema/spring http://camel.apache.org/schema/spring/camel-spring.xsd">

    <camelContext id="{request.name}-context" xmlns="http://camel.apache.org/schema/spring">
        <route id="{request.name}-route">
            <from uri="timer:hello?period=5000"/>
            <setBody>
                <simple>Hello from {request.name} at ${{date:now:HH:mm:ss}}</simple>
            </setBody>
            <log message="${{body}}"/>
        </route>
    </camelContext>

</beans>
"""


def generate_blueprint_xml(request: ScaffoldRequest) -> str:
    """Generate the OSGi Blueprint route definition."""
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<blueprint xmlns="http://www.osgi.org/xmlns/blueprint/v1.0.0"
           xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"
           xsi:schemaLocation="
             http://www.osgi.org/xmlns/blueprint/v1.0.0 https://www.osgi.org/xmlns/blueprint/v1.0.0/blueprint.xsd
             http://camel.apache.org/schema/blueprint http://camel.apache.org/schema/blueprint/camel-blueprint.xsd">

    <camelContext id="{request.name}-context" xmlns="http://camel.apache.org/schema/blueprint">
        <route id="{request.name}-route">
            <from uri="timer:hello?period=5000"/>
            <setBody>
                <simple>Hello from {request.name} at ${{date:now:HH:mm:ss}}</simple>
            </setBody>
            <log message="${{body}}"/>
        </route>
    </camelContext>

</blueprint>
"""


def generate_camel_route_java(request: ScaffoldRequest) -> str:
    """Generate ``CamelRoute.java`` for the Java DSL."""
    return f"""package {request.package}.routes;

import org.apache.camel.builder.RouteBuilder;

public class CamelRoute extends RouteBuilder {{

    @Override
    public void configure() throws Exception {{
        from("timer:hello?period=5000")
            .routeId("{request.name}-route")
            .setBody(simple("Hello from {request.name} at ${{date:now:HH:mm:ss}}"))
            .log("${{body}}");
    }}
}}
"""


def generate_launcher_java(request: ScaffoldRequest) -> str:
    """Generate ``Launcher.java``, the Camel Main entry point for the Java DSL."""
    return f"""package {request.package}.routes;

import org.apache.camel.main.Main;

public class Launcher {{

    public static void main(String[] args) throws Exception {{
        Main main = new Main();
        main.addRouteBuilder(new CamelRoute());
        main.run(args);
    }}
}}
"""


def generate_log4j_properties() -> str:
    return """appender.out.type = Console
appender.out.name = out
appender.out.layout.type = PatternLayout
appender.out.layout.pattern = [%30.30t] %-30.30c{1} %-5p %m%n
rootLogger.level = INFO
rootLogger.appenderRef.out.ref = out
"""


def generate_readme(request: ScaffoldRequest) -> str:
    """Generate ``README.md`` with build and run instructions for the DSL."""
    run_cmd = "mvn exec:java" if request.camel_dsl == "java" else "mvn camel:run"
    lines = [
        f"# {request.name}",
        "",
        f"Apache Camel {request.camel_version} project using the {request.camel_dsl} DSL.",
        "",
        "## Build",
        "",
        "    mvn clean install",
        "",
        "## Run",
        "",
        f"    {run_cmd}",
        "",
    ]
    if request.camel_dsl == "blueprint":
        lines += [
            "The bundle can also be deployed to an OSGi container such as Apache Karaf:",
            "",
            f"    install -s mvn:{request.package}/{request.name}/1.0.0-SNAPSHOT",
            "",
        ]
    if request.wsdl2rest:
        lines += [
            "## wsdl2rest",
            "",
            f"The REST endpoints and CXF client classes were generated from `{request.wsdl}`.",
        ]
        if request.jaxrs_url:
            lines.append(f"REST endpoint: {request.jaxrs_url}")
        if request.jaxws_url:
            lines.append(f"SOAP endpoint: {request.jaxws_url}")
        lines.append("")
    return "\n".join(lines)


def project_files(request: ScaffoldRequest) -> "OrderedDict[str, str]":
    """Map relative paths to contents for every templated file of the project.

    Args:
        request: The scaffold request.

    Returns:
        Ordered mapping of project-relative paths to file contents.
    """
    files = OrderedDict()
    files["pom.xml"] = generate_pom_xml(request)
    files["README.md"] = generate_readme(request)
    files["src/main/resources/log4j2.properties"] = generate_log4j_properties()

    if request.camel_dsl == "spring":
        files[CONTEXT_FILES["spring"]] = generate_camel_context_xml(request)
    elif request.camel_dsl == "blueprint":
        files[CONTEXT_FILES["blueprint"]] = generate_blueprint_xml(request)
    else:
        routes_dir = f"src/main/java/{request.package_path}/routes"
        files[f"{routes_dir}/CamelRoute.java"] = generate_camel_route_java(request)
        files[f"{routes_dir}/Launcher.java"] = generate_launcher_java(request)

    if request.wsdl2rest:
        files[WSDL2REST_FRAGMENT] = generate_wsdl2rest_pom_fragment(request)
    return files
