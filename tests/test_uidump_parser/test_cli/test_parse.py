import logging
from pathlib import Path

import pytest
from click.testing import Result
from typer.testing import CliRunner

from uidump_parser.cli.parse import NO_CRITERIA, app

runner = CliRunner()


def invoke(*args: str | Path) -> Result:
    return runner.invoke(app, [str(arg) for arg in args])


SIMPLE = '<root><node resource-id="a" text="hi"/></root>'

DUMP = """<?xml version='1.0' encoding='UTF-8' standalone='yes' ?>
<hierarchy rotation="0">
  <node index="0" text="" resource-id="" class="android.widget.FrameLayout" package="com.example" bounds="[0,0][1080,2400]">
    <node index="0" text="Instagram" resource-id="com.example:id/label" class="android.widget.TextView" package="com.example" enabled="true" bounds="[10,20][300,80]" />
    <node index="1" text="Grindr" resource-id="com.example:id/label" class="android.widget.TextView" package="com.example" enabled="false" bounds="[10,100][300,160]" />
  </node>
</hierarchy>
"""


@pytest.fixture
def simple(tmp_path: Path) -> Path:
    path = tmp_path / "simple.xml"
    path.write_text(SIMPLE, encoding="utf-8")
    return path


@pytest.fixture
def dump(tmp_path: Path) -> Path:
    path = tmp_path / "dump.xml"
    path.write_text(DUMP, encoding="utf-8")
    return path


def test_full_dump(simple: Path) -> None:
    result = invoke("--file", simple, "--resource-id", "a")
    assert result.exit_code == 0
    assert result.stdout == "Node: node\n  resource-id: a\n  text: hi\n\n"


def test_filter_rejects(simple: Path) -> None:
    result = invoke(
        "--file", simple, "--resource-id", "a", "--filter-attribute", "text=bye"
    )
    assert result.exit_code == 0
    assert result.stdout == ""


def test_print_only(simple: Path) -> None:
    result = invoke("-f", simple, "-r", "a", "-p", "text")
    assert result.exit_code == 0
    assert result.stdout == "text: hi\n"


def test_print_only_missing(simple: Path) -> None:
    result = invoke("-f", simple, "-r", "a", "-p", "nonexistent")
    assert result.exit_code == 0
    assert result.stdout == "Attribute 'nonexistent' not found on node node\n"


def test_malformed(tmp_path: Path) -> None:
    path = tmp_path / "broken.xml"
    path.write_text("<root><node resource-id='a'></root>", encoding="utf-8")
    result = invoke("--file", path, "--resource-id", "a")
    assert result.exit_code == 1
    assert f"Error: could not parse file {path}" in result.output
    assert "Node:" not in result.output


def test_no_criteria(simple: Path) -> None:
    result = invoke("--file", simple)
    assert result.exit_code == 0
    assert NO_CRITERIA in result.output
    assert "Node:" not in result.output


def test_malformed_filter_is_no_criteria(simple: Path) -> None:
    result = invoke("--file", simple, "-F", "text")
    assert result.exit_code == 0
    assert NO_CRITERIA in result.output


def test_missing_file_option() -> None:
    result = invoke("--resource-id", "a")
    assert result.exit_code != 0


def test_unknown_option(simple: Path) -> None:
    result = invoke("--file", simple, "--xpath", "//node")
    assert result.exit_code != 0


@pytest.mark.parametrize("option", ["--help", "-h"])
def test_help(option: str) -> None:
    result = invoke("--resource-id", "a", option)
    assert result.exit_code == 0
    assert "--filter-attribute" in result.stdout
    assert "Examples" in result.stdout


def test_priority(dump: Path) -> None:
    result = invoke(
        "-f",
        dump,
        "--text",
        "Grindr",
        "--class",
        "android.widget.FrameLayout",
        "--resource-id",
        "com.example:id/label",
        "-p",
        "text",
    )
    assert result.exit_code == 0
    assert result.stdout == "text: Instagram\ntext: Grindr\n"


def test_class_with_filter(dump: Path) -> None:
    result = invoke(
        "-f",
        dump,
        "-c",
        "android.widget.TextView",
        "-F",
        "enabled=true",
        "-p",
        "resource-id",
    )
    assert result.stdout == "resource-id: com.example:id/label\n"


def test_filter_only(dump: Path) -> None:
    result = invoke("-f", dump, "-F", "package=com.example", "-p", "index")
    assert result.exit_code == 0
    assert result.stdout == "index: 0\nindex: 0\nindex: 1\n"


def test_bounds(dump: Path) -> None:
    result = invoke("-f", dump, "-t", "Instagram", "--bounds")
    assert result.stdout == "bounds: [10,20][300,80]\n"
    result = invoke("-f", dump, "-t", "Instagram", "-b", "-p", "text")
    assert result.stdout == "text: Instagram\n"


def test_zero_matches(dump: Path) -> None:
    result = invoke("-f", dump, "-t", "Telegram")
    assert result.exit_code == 0
    assert result.stdout == ""


def test_idempotent(dump: Path) -> None:
    first = invoke("-f", dump, "-c", "android.widget.TextView")
    second = invoke("-f", dump, "-c", "android.widget.TextView")
    assert first.stdout == second.stdout
    assert first.stdout.count("Node: node") == 2


def test_debug(dump: Path, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="uidump_parser"):
        result = invoke("-f", dump, "-t", "Grindr", "-p", "text", "-d")
    assert result.exit_code == 0
    assert "Successfully loaded XML file" in caplog.text
    assert "Processing node: node" in caplog.text
    assert "text: Grindr" in result.stdout
