"""
Renderers for the executable lifecycle scripts placed under ``scripts/``.

Each script follows the "scripts to rule them all" convention: one small bash
entry point per developer task. Only the binary/project name and organization
are interpolated; the bodies are otherwise fixed text.
"""

from __future__ import annotations

GO_INSTALL_VERSION = "1.17.1"
GOLANGCI_LINT_VERSION = "v1.36.0"
PACKAGE_TARGETS = (
    ("darwin", "amd64"),
    ("darwin", "arm64"),
    ("linux", "amd64"),
    ("linux", "arm64"),
)

_SCRIPT_DIR = 'DIR="$( cd "$( dirname "${BASH_SOURCE[0]}" )" >/dev/null 2>&1 && pwd )"\n'

ALL_SCRIPT = (
    "#!/bin/bash\n"
    "# scripts/all: Runs several things together: lint, test, clean and build\n"
    + _SCRIPT_DIR
    + """
$DIR/lint
$DIR/test
$DIR/clean
$DIR/build
"""
)

BOOTSTRAP_SCRIPT = (
    """#!/bin/bash
# scripts/bootstrap: Resolve all dependencies that the application requires to
#                   run.

"""
    + f'GOV="{GO_INSTALL_VERSION}"\n'
    + """if ! command -v go &> /dev/null
then
    echo "os $(uname -s) arch $(uname -m)"
    if [ "$(uname -s)" = "Darwin" ]; then
        echo "install via homebrew"
        brew update
        brew install go
    fi

    if [ "$(uname -s)" = "Linux" ] && [ "$(uname -m)" = "armv7l" ]; then
        echo "arm found installing go"
        curl -L -O https://golang.org/dl/go$GOV.linux-armv6l.tar.gz
        sudo tar -C /usr/local -xzf go$GOV.linux-armv6l.tar.gz
        echo "add 'export PATH=\\$PATH:/usr/local/go/bin' to your .bashrc"
        rm go$GOV.linux-armv6l.tar.gz
    fi

    if [ "$(uname -s)" = "Linux" ] && [ "$(uname -m)" = "x86_64" ]; then
        echo "amd64 found installing go"
        curl -L -O https://golang.org/dl/go$GOV.linux-amd64.tar.gz
        sudo tar -C /usr/local -xzf go$GOV.linux-amd64.tar.gz
        echo "add 'export PATH=\\$PATH:/usr/local/go/bin' to your .bashrc"
        rm go$GOV.linux-amd64.tar.gz
    fi

else
    echo "go installed skipping"
fi

if ! command -v golangci-lint &> /dev/null
then
"""
    + "    curl -sSfL https://raw.githubusercontent.com/golangci/golangci-lint/master/install.sh"
    + f" | sh -s -- -b $(go env GOPATH)/bin {GOLANGCI_LINT_VERSION}\n"
    + """else
    echo "golangci-lint installed skipping"
fi
"""
)

CIBUILD_SCRIPT = (
    "#!/bin/bash\n"
    + _SCRIPT_DIR
    + """
# scripts/cibuild: Setup environment for CI to run tests. This is primarily
#                 designed to run on the continuous integration server.

$DIR/setup && \\
$DIR/lint && \\
$DIR/test && \\
$DIR/build
"""
)

CLEAN_SCRIPT = """#!/bin/bash
# scripts/clean: Remove build binary files

rm -fr ./bin
mkdir ./bin
"""

COVER_HTML_SCRIPT = """#!/bin/bash
# scripts/cover-html: See the coverage report in a webpage

t="/tmp/go-cover.$$.tmp"
go test -race -covermode=atomic -coverprofile=$t ./... && go tool cover -html=$t && unlink $t
"""

LINT_SCRIPT = """#!/bin/bash
# scripts/lint: verify no obvious bugs or layout problems are found

gofmt -s -w . && \\
golangci-lint run
"""

SETUP_SCRIPT = (
    """#!/bin/bash
# scripts/setup: Set up application for the first time after cloning, or set it
#               back to the initial first unused state.

"""
    + _SCRIPT_DIR
    + """$DIR/bootstrap && \\
go mod verify
"""
)

TEST_SCRIPT = """#!/bin/bash
# scripts/test: Run test suite for application.

t="/tmp/go-cover.$$.tmp"
go test -race -covermode=atomic -coverprofile=$t ./... && go tool cover -func=$t
last=$?
unlink $t || true
if [ "$last" = "0" ]; then
    echo "successfully ran"
else
    (exit 1)
fi
"""

UPDATE_SCRIPT = (
    """#!/bin/bash
# scripts/update: Update application to run for its current checkout.

"""
    + _SCRIPT_DIR
    + """$DIR/bootstrap
go mod tidy
"""
)


def render_all_script() -> str:
    return ALL_SCRIPT


def render_bootstrap_script() -> str:
    return BOOTSTRAP_SCRIPT


def render_build_script(project: str) -> str:
    """Compile the binary into ``bin/<project>``."""
    return (
        "#!/bin/bash\n"
        "# scripts/build: Compiles binary and outputs it to the bin folder\n"
        "\n"
        "rm -fr ./bin\n"
        "mkdir ./bin\n"
        f"go build -o bin/{project} .\n"
    )


def render_cibuild_script() -> str:
    return CIBUILD_SCRIPT


def render_clean_script() -> str:
    return CLEAN_SCRIPT


def render_cover_html_script() -> str:
    return COVER_HTML_SCRIPT


def render_install_script(org: str, project: str) -> str:
    """
    Download the main branch archive, build it and copy the binary to /usr/local/bin.

    GitHub archives unpack into ``<project>-main``.
    """
    checkout = f"{project}-main"
    return (
        "#!/usr/bin/env bash\n"
        "# scripts/install.sh: install script for others to use, install.sh is a convention"
        " and why the name is different\n"
        "orig_dir=$(pwd)\n"
        "cd /tmp\n"
        f"curl -L -o main.zip https://github.com/{org}/{project}/archive/refs/heads/main.zip\n"
        "unzip main.zip\n"
        "rm main.zip\n"
        f"cd {checkout}\n"
        "./scripts/build\n"
        f'echo "copying binary to /usr/local/bin/{project} need sudo permissions to write"\n'
        f"sudo cp ./bin/{project} /usr/local/bin/\n"
        "cd ..\n"
        f"rm -fr {checkout}\n"
        'cd "$orig_dir"\n'
    )


def render_lint_script() -> str:
    return LINT_SCRIPT


def render_package_script(project: str) -> str:
    """Cross-compile and tar the binary for every supported platform of the tagged release."""
    lines = [
        "#!/bin/bash",
        "# scripts/package: build and tgz all supported platforms and architectures",
        f"BIN={project}",
        _SCRIPT_DIR.rstrip("\n"),
        "$DIR/clean",
        "VERSION=$(git describe --abbrev=0 --tags)",
        "ORIG=$(git branch --show-current)",
        'echo "packaging $VERSION"',
        "git checkout $VERSION",
    ]
    for goos, goarch in PACKAGE_TARGETS:
        lines.append(f"GOOS={goos} GOARCH={goarch} go build -o bin/$BIN .")
        lines.append(f"tar czvf ./bin/$BIN-$VERSION-{goos}-{goarch}.tgz ./bin/$BIN")
    lines.append("git checkout $ORIG")
    return "\n".join(lines) + "\n"


def render_setup_script() -> str:
    return SETUP_SCRIPT


def render_test_script() -> str:
    return TEST_SCRIPT


def render_update_script() -> str:
    return UPDATE_SCRIPT
