#!/usr/bin/env python3
"""Apache Camel project generator.

Scaffolds a Maven project for the Spring, Blueprint or Java Camel DSL and,
optionally, runs wsdl2rest to generate REST endpoints in front of an existing
SOAP service.

Generated files:
    - pom.xml                 — Camel BOM, DSL modules, logging, test support
    - README.md               — build and run instructions
    - DSL route definition    — camel-context.xml, blueprint.xml or CamelRoute.java + Launcher.java
    - src/main/java/...       — wsdl2rest client classes (with --wsdl2rest)

Usage:
    python generate_camel_project.py [--output <dir>] [key=value ...]
    python generate_camel_project.py appname=Demo package=com.demo camelDSL=spring camelVersion=2.22.2
    python generate_camel_project.py --wsdl2rest wsdl=address.wsdl jaxws=http://localhost:9090/AddressPort

Answers not given on the command line are asked for interactively, unless
--no-prompt is given. If --dry-run is given, outputs are printed to stdout
instead of written.
"""

from camelgen.cli import main

if __name__ == "__main__":
    main()
