"""Literal templates for the files of a new package.

Templates are looked up by (mode, artifact kind). A missing entry means
the mode does not produce that artifact. Path and body templates use
``string.Template`` placeholders so the braces of the generated Swift
code need no escaping; ``$name`` is the package name, which doubles as
the module and type name.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from string import Template

from pkginit.config import (
    GITIGNORE_FILENAME,
    MANIFEST_FILENAME,
    MODULE_MAP_FILENAME,
    SOURCE_EXTENSION,
    SOURCES_DIRNAME,
    TESTS_DIRNAME,
)
from pkginit.scaffold.mode import InitMode

# Greeting baked into the generated library type and its test
GREETING = "Hello, World!"


class ArtifactKind(Enum):
    """Kinds of generated files."""

    MANIFEST = "manifest"
    GITIGNORE = "gitignore"
    SOURCE = "source"
    MODULE_MAP = "module-map"
    LINUX_MAIN = "linux-main"
    TEST_STUB = "test-stub"


@dataclass(frozen=True)
class FileTemplate:
    """A file path (relative to the package root) and its contents."""

    path: Template
    body: Template

    def render_path(self, name: str) -> str:
        return self.path.substitute(name=name)

    def render_body(self, name: str) -> str:
        return self.body.substitute(name=name)


MANIFEST = FileTemplate(
    path=Template(MANIFEST_FILENAME),
    body=Template(
        "import PackageDescription\n"
        "\n"
        "let package = Package(\n"
        '    name: "$name"\n'
        ")\n"
    ),
)

GITIGNORE = FileTemplate(
    path=Template(GITIGNORE_FILENAME),
    body=Template(
        ".DS_Store\n"
        "/.build\n"
        "/Packages\n"
        "/*.xcodeproj\n"
    ),
)

LIBRARY_SOURCE = FileTemplate(
    path=Template(f"{SOURCES_DIRNAME}/$name{SOURCE_EXTENSION}"),
    body=Template(
        "struct $name {\n"
        "\n"
        f'    var text = "{GREETING}"\n'
        "}\n"
    ),
)

EXECUTABLE_SOURCE = FileTemplate(
    path=Template(f"{SOURCES_DIRNAME}/main{SOURCE_EXTENSION}"),
    body=Template('print("Hello, world!")\n'),
)

MODULE_MAP = FileTemplate(
    path=Template(MODULE_MAP_FILENAME),
    body=Template(
        "module $name [system] {\n"
        '  header "/usr/include/$name.h"\n'
        '  link "$name"\n'
        "  export *\n"
        "}\n"
    ),
)

LINUX_MAIN = FileTemplate(
    path=Template(f"{TESTS_DIRNAME}/LinuxMain{SOURCE_EXTENSION}"),
    body=Template(
        "import XCTest\n"
        "@testable import ${name}TestSuite\n"
        "\n"
        "XCTMain([\n"
        "     testCase(${name}Tests.allTests),\n"
        "])\n"
    ),
)

TEST_STUB = FileTemplate(
    path=Template(f"{TESTS_DIRNAME}/$name/${{name}}Tests{SOURCE_EXTENSION}"),
    body=Template(
        "import XCTest\n"
        "@testable import $name\n"
        "\n"
        "class ${name}Tests: XCTestCase {\n"
        "    func testExample() {\n"
        "        // This is an example of a functional test case.\n"
        "        // Use XCTAssert and related functions to verify your tests produce the correct results.\n"
        f'        XCTAssertEqual(${{name}}().text, "{GREETING}")\n'
        "    }\n"
        "\n"
        "\n"
        "    static var allTests : [(String, (${name}Tests) -> () throws -> Void)] {\n"
        "        return [\n"
        '            ("testExample", testExample),\n'
        "        ]\n"
        "    }\n"
        "}\n"
    ),
)

_COMMON = {
    ArtifactKind.MANIFEST: MANIFEST,
    ArtifactKind.GITIGNORE: GITIGNORE,
}

TEMPLATES: dict[tuple[InitMode, ArtifactKind], FileTemplate] = {
    **{(mode, kind): template for mode in InitMode for kind, template in _COMMON.items()},
    (InitMode.LIBRARY, ArtifactKind.SOURCE): LIBRARY_SOURCE,
    (InitMode.LIBRARY, ArtifactKind.LINUX_MAIN): LINUX_MAIN,
    (InitMode.LIBRARY, ArtifactKind.TEST_STUB): TEST_STUB,
    (InitMode.EXECUTABLE, ArtifactKind.SOURCE): EXECUTABLE_SOURCE,
    (InitMode.SYSTEM_MODULE, ArtifactKind.MODULE_MAP): MODULE_MAP,
}


def template_for(mode: InitMode, kind: ArtifactKind) -> FileTemplate | None:
    """Look up the template for ``kind`` in ``mode``, or None if not produced."""
    return TEMPLATES.get((mode, kind))
