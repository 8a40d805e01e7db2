"""
Renderers for the non-executable files of a new project.
"""

from __future__ import annotations

MIT_LICENSE_BODY = """
Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.
"""

GO_MODULE_HOST = "github.com"
GO_VERSION = "1.17"

GITIGNORE = """# ---> Go
# Binaries for programs and plugins
*.exe
*.exe~
*.dll
*.so
*.dylib

# Test binary
*.test

# Output of the go coverage tool, specifically when used with LiteIDE
*.out

bin/
# Dependency directories (remove the comment below to include it)
# vendor/
.DS_Store

dist/
"""

MAIN_GO_TEMPLATE = """package main

import (
    "os"
    "fmt"
)

func usage() string {{
    return "usage: {project}"
}}

func main(){{
    args := os.Args
    if len(args) < 2 {{
        fmt.Println(usage())
        os.Exit(1)
    }}
}}
"""

MAIN_TEST_GO = """package main

import (
    "testing"
)

func TestFunc(t * testing.T){
    if 1 != 2 {
        t.Errorf("update test to be useful")
    }
}
"""


def render_license(year: int, author: str) -> str:
    """
    Render the MIT LICENSE file.

    The author is interpolated verbatim; `git config user.name` output keeps its
    trailing newline, which is what separates the copyright line from the body.
    """
    return f"MIT License\n\nCopyright (c) {year} {author}" + MIT_LICENSE_BODY


def render_readme(year: int, project: str, author: str, org: str) -> str:
    """Render README.md with usage, install, build and test sections followed by the license."""
    sections = [
        f"# {project}\n\nPLACEHOLDER\n\n",
        f"## how to use\n\n```sh\n{project}\n```\n\n",
        "## how to install\n\n"
        f"```sh\ncurl -s https://raw.githubusercontent.com/{org}/{project}/scripts/install.sh\n```\n\n",
        f"## how to build and run\n\n```sh\n./scripts/build\n./bin/{project}\n```\n\n",
        "## how to test\n\n```sh\n./scripts/test\n```\n\n",
        "## license\n\n",
        render_license(year, author),
    ]
    return "".join(sections)


def render_gitignore() -> str:
    return GITIGNORE


def render_go_mod(org: str, project: str) -> str:
    return f"module {GO_MODULE_HOST}/{org}/{project}\n\ngo {GO_VERSION}"


def _license_comment(year: int, author: str) -> str:
    """Render the license as a Go block comment header."""
    body_lines = [""] + MIT_LICENSE_BODY.strip("\n").split("\n")
    header = f"/*\n** MIT License\n**\n** Copyright (c) {year} {author}"
    body = "".join(f"** {line}\n" for line in body_lines)
    return header + body + "*/\n"


def render_main(year: int, project: str, author: str) -> str:
    return _license_comment(year, author) + MAIN_GO_TEMPLATE.format(project=project)


def render_main_test(year: int, author: str) -> str:
    return _license_comment(year, author) + MAIN_TEST_GO
