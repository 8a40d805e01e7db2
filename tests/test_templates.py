import pytest

from go_init.config import ProjectContext
from go_init.scaffold.generator import DOCUMENT_TARGETS, SCRIPT_TARGETS
from go_init.templates import TEMPLATES, render_template
from go_init.templates.documents import (
    MIT_LICENSE_BODY,
    render_go_mod,
    render_license,
    render_main,
    render_main_test,
    render_readme,
)
from go_init.templates.scripts import (
    PACKAGE_TARGETS,
    render_build_script,
    render_install_script,
    render_package_script,
)


def test_go_mod_is_exact() -> None:
    assert render_go_mod("bar", "foo") == "module github.com/bar/foo\n\ngo 1.17"


def test_license_copyright_line_carries_year_and_author_once() -> None:
    license_text = render_license(2024, "Jane Doe\n")

    assert license_text.startswith("MIT License\n\nCopyright (c) 2024 Jane Doe\n")
    assert license_text.count("2024") == 1
    assert license_text.count("Jane Doe") == 1
    assert license_text.endswith(MIT_LICENSE_BODY)


def test_author_is_interpolated_verbatim() -> None:
    license_text = render_license(2024, "Jane Doe  \n")

    assert "Copyright (c) 2024 Jane Doe  \n" in license_text


def test_readme_title_install_and_license() -> None:
    readme = render_readme(2024, "foo", "Jane Doe\n", "bar")

    assert readme.splitlines()[0] == "# foo"
    assert "curl -s https://raw.githubusercontent.com/bar/foo/scripts/install.sh" in readme
    assert "./bin/foo" in readme
    assert readme.endswith(render_license(2024, "Jane Doe\n"))
    assert MIT_LICENSE_BODY in readme


def test_go_sources_carry_license_header() -> None:
    main_go = render_main(2024, "foo", "Jane Doe\n")
    main_test = render_main_test(2024, "Jane Doe\n")

    for source in (main_go, main_test):
        assert source.startswith("/*\n** MIT License\n**\n** Copyright (c) 2024 Jane Doe\n** \n** Permission")
        assert "*/\npackage main\n" in source

    assert 'return "usage: foo"' in main_go
    assert "func TestFunc(t * testing.T)" in main_test


def test_build_script_targets_project_binary() -> None:
    script = render_build_script("foo")

    assert script.startswith("#!/bin/bash\n")
    assert script.endswith("go build -o bin/foo .\n")


def test_package_script_builds_every_target() -> None:
    script = render_package_script("foo")

    assert "BIN=foo\n" in script
    for goos, goarch in PACKAGE_TARGETS:
        assert f"GOOS={goos} GOARCH={goarch} go build -o bin/$BIN ." in script
        assert f"./bin/$BIN-$VERSION-{goos}-{goarch}.tgz" in script
    assert script.rstrip().endswith("git checkout $ORIG")


def test_install_script_uses_project_name() -> None:
    script = render_install_script("bar", "foo")

    assert "https://github.com/bar/foo/archive/refs/heads/main.zip" in script
    assert "sudo cp ./bin/foo /usr/local/bin/" in script
    assert "go-init" not in script


def test_every_script_starts_with_shebang(context: ProjectContext) -> None:
    for _, name in SCRIPT_TARGETS:
        assert render_template(name, context).startswith("#!"), name


def test_registry_covers_every_target() -> None:
    names = {name for _, name in DOCUMENT_TARGETS + SCRIPT_TARGETS}

    assert names == set(TEMPLATES)


def test_render_template_reads_context(context: ProjectContext) -> None:
    assert render_template("go_mod", context) == "module github.com/bar/foo\n\ngo 1.17"
    assert render_template("build", context).endswith("go build -o bin/foo .\n")


def test_render_template_rejects_unknown_name(context: ProjectContext) -> None:
    with pytest.raises(KeyError):
        render_template("makefile", context)
