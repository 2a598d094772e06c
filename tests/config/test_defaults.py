# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module tests the defaults module."""

import os
from importlib.resources import files
from pathlib import Path

import pytest

from packquery.config.defaults import ConfigParser, create_defaults, defaults, load_defaults


def test_load_packaged_defaults() -> None:
    """Test loading the packaged defaults without any user configuration."""
    assert load_defaults("") is True
    assert defaults.getboolean("query", "use_cache") is False
    assert defaults.get_list("query", "types") == []


def test_load_user_defaults(tmp_path: Path) -> None:
    """Test that the values in the user configuration are prioritized."""
    user_config = tmp_path.joinpath("defaults.ini")
    user_config.write_text(
        """
        [query]
        use_cache = True
        types = app lib
        """,
        encoding="utf-8",
    )

    assert load_defaults(str(user_config)) is True
    assert defaults.getboolean("query", "use_cache") is True
    assert defaults.get_list("query", "types") == ["app", "lib"]


def test_load_missing_user_defaults() -> None:
    """Test loading a user configuration that does not exist."""
    assert load_defaults("invalid") is False


def test_load_malformed_user_defaults(tmp_path: Path) -> None:
    """Test loading a user configuration that cannot be parsed."""
    user_config = tmp_path.joinpath("defaults.ini")
    user_config.write_text("use_cache = True\n", encoding="utf-8")

    assert load_defaults(str(user_config)) is False


def test_create_defaults(tmp_path: Path) -> None:
    """Test dumping the default values."""
    assert create_defaults(str(tmp_path), str(tmp_path)) is True
    dumped = tmp_path.joinpath("defaults.ini")
    assert dumped.is_file()
    packaged = files("packquery.config").joinpath("defaults.ini")
    assert dumped.read_text(encoding="utf-8") == packaged.read_text(encoding="utf-8")


@pytest.mark.xfail(
    os.geteuid() == 0,
    reason="Only effective for non-root users",
)
def test_create_defaults_without_permission() -> None:
    """Test dumping default config in cases where the user does not have write permission to the output location."""
    assert create_defaults(output_path="/", cwd_path="/") is False


@pytest.mark.parametrize(
    ("user_config_input", "delimiter", "duplicated_ok", "expect"),
    [
        pytest.param(
            """
            [test.list]
            list = lib app
                lib
            """,
            None,
            False,
            ["lib", "app"],
            id="Split on whitespace and keep the first occurrences",
        ),
        pytest.param(
            """
            [test.list]
            list = lib app lib
            """,
            None,
            True,
            ["lib", "app", "lib"],
            id="Keep the duplicated values",
        ),
        pytest.param(
            """
            [test.list]
            list = ,lib, app, app
            """,
            ",",
            False,
            ["", "lib", " app"],
            id="Split on a delimiter",
        ),
        pytest.param(
            """
            [test.list]
            list =
            """,
            None,
            False,
            [],
            id="Empty list",
        ),
    ],
)
def test_get_list(user_config_input: str, delimiter: str | None, duplicated_ok: bool, expect: list[str]) -> None:
    """Test parsing a list from the configuration."""
    config_parser = ConfigParser()
    config_parser.read_string(user_config_input)

    assert config_parser.get_list("test.list", "list", delimiter=delimiter, duplicated_ok=duplicated_ok) == expect


@pytest.mark.parametrize(
    ("section", "item"),
    [
        pytest.param("test.list", "missing", id="Missing item"),
        pytest.param("missing", "list", id="Missing section"),
    ],
)
def test_get_list_fallback(section: str, item: str) -> None:
    """Test that the fallback is returned when the item cannot be found."""
    config_parser = ConfigParser()
    config_parser.read_string("[test.list]\nlist = lib\n")

    assert config_parser.get_list(section, item) == []
    assert config_parser.get_list(section, item, fallback=["app"]) == ["app"]
