# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from pathlib import Path
from spellindex.argx import arg, CommandLineTool, Config, UserError
from functools import cached_property
from typing import Callable, NoReturn

import pytest


class TestCLI(CommandLineTool):
    __test__ = False  # to avoid PytestCollectionWarning

    @arg()
    def xxx(self) -> None:
        """3"""

    @arg()
    def aaa(self) -> None:
        """1"""

    @arg("value", type=int)
    def ccc_ddd(self) -> int:
        """2"""
        return self.args.value


def test_commands_are_alphabetically_ordered() -> None:
    cli = TestCLI("testcli")
    cli.add_cmds()

    action_order = [item.dest for item in cli.subparsers._choices_actions]
    assert action_order == ["aaa", "ccc-ddd", "xxx"]


def test_command_has_function_help() -> None:
    cli = TestCLI("testcli")
    cli.add_cmds()

    help_text = cli.subparsers.choices["ccc-ddd"].format_help()
    assert "2" in help_text


def test_run_returns_command_result(tmp_path: Path) -> None:
    assert TestCLI("testcli").run(["--config", str(tmp_path / "missing.json"), "ccc-ddd", "42"]) == 42


class DescriptorCLI(CommandLineTool):
    @property
    def raise1(self) -> NoReturn:
        raise RuntimeError("evaluated raise1")

    @cached_property
    def raise2(self) -> NoReturn:
        raise RuntimeError("evaluated raise2")

    @arg("something")
    def example_command(self) -> None:
        """Example command."""


def test_descriptors_are_not_eagerly_evaluated() -> None:
    cli = DescriptorCLI("DescriptorCLI")
    calls: list[Callable] = []
    cli.add_cmd = calls.append  # type: ignore[method-assign]
    cli.add_cmds()
    assert calls == [cli.example_command]


def test_config_missing_file_is_empty(tmp_path: Path) -> None:
    assert Config(tmp_path / "missing.json") == {}


def test_config_load(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text('{"error_distance": 1, "dictionaries": ["words.txt"]}', encoding="utf-8")
    config = Config(path)
    assert config["dictionaries"] == ["words.txt"]
    assert config.get_int("error_distance", 2) == 1
    assert config.get_int("fallback_rounds", 2) == 2


@pytest.mark.parametrize(
    ["content", "message"],
    [
        ("{not json", "Invalid JSON"),
        ("[1, 2]", "must contain a JSON object"),
    ],
)
def test_config_invalid(tmp_path: Path, content: str, message: str) -> None:
    path = tmp_path / "config.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(UserError, match=message):
        Config(path)


@pytest.mark.parametrize("value", [-1, "2", True, 1.5])
def test_config_get_int_invalid(tmp_path: Path, value: object) -> None:
    config = Config(tmp_path / "missing.json")
    config["error_distance"] = value
    with pytest.raises(UserError, match="error_distance"):
        config.get_int("error_distance", 2)


@pytest.mark.parametrize("value,expected", [(None, None), (0, 0), (2.5, 2.5), (10, 10)])
def test_config_get_number(tmp_path: Path, value: object, expected: object) -> None:
    config = Config(tmp_path / "missing.json")
    config["request_timeout"] = value
    assert config.get_number("request_timeout") == expected


@pytest.mark.parametrize("value", [-0.5, "soon", False, [1]])
def test_config_get_number_invalid(tmp_path: Path, value: object) -> None:
    config = Config(tmp_path / "missing.json")
    config["request_timeout"] = value
    with pytest.raises(UserError, match="request_timeout"):
        config.get_number("request_timeout")
