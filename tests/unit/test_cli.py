"""Tests for the bindgen command line."""

import logging

import pytest

from bindgen.cli import main


@pytest.fixture(autouse=True)
def restore_bindgen_logger():
    logger = logging.getLogger("bindgen")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


@pytest.mark.parametrize(
    "argv, expected",
    [
        (["camel", "foo_bar_baz"], "FooBarBaz"),
        (["camel", "foo_bar_baz", "--var"], "fooBarBaz"),
        (["java-name", "com.example.Outer$Inner"], "com.example.Outer.Inner"),
        (["android-id", "@+id/title"], "title"),
    ],
)
def test_conversions(argv, expected, capsys):
    assert main(argv) == 0
    assert capsys.readouterr().out.strip() == expected


def test_layout_uses_configuration(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "bindgen.yaml").write_text(
        "module_package: com.example\nclass_suffix: Views\n", encoding="utf-8"
    )

    assert main(["layout", "activity_main"]) == 0
    assert capsys.readouterr().out.strip() == "com.example.databinding.ActivityMainViews"

    assert main(["layout", "activity_main", "--package", ""]) == 0
    assert capsys.readouterr().out.strip() == "ActivityMainViews"


def test_layout_with_explicit_config(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    config = tmp_path / "custom.yaml"
    config.write_text("module_package: org.demo\n", encoding="utf-8")

    assert main(["-v", "layout", "list_item", "--config", str(config)]) == 0
    assert capsys.readouterr().out.strip() == "org.demo.databinding.ListItemBinding"


def test_library_errors_exit_with_one(capsys):
    assert main(["android-id", "title"]) == 1
    assert "Malformed resource identifier" in capsys.readouterr().err


def test_invalid_config_exits_with_one(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "bindgen.yaml").write_text("unknown: 1\n", encoding="utf-8")

    assert main(["layout", "main"]) == 1
    assert "Invalid configuration" in capsys.readouterr().err


def test_version(capsys):
    import bindgen

    assert main(["version"]) == 0
    assert capsys.readouterr().out.strip() == f"bindgen {bindgen.__version__}"


def test_no_command_prints_help(capsys):
    assert main([]) == 2
    assert "usage: bindgen" in capsys.readouterr().out


def test_layout_path_uses_output_dir(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "bindgen.yaml").write_text(
        "module_package: com.example\noutput_dir: build/gen\n", encoding="utf-8"
    )

    assert main(["layout", "main", "--path"]) == 0
    expected = tmp_path.joinpath(
        "build", "gen", "com", "example", "databinding", "MainBinding.java"
    ).relative_to(tmp_path)
    assert capsys.readouterr().out.strip() == str(expected)
