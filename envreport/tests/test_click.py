# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
from pathlib import Path
from typing import Optional, Sequence

import click
import pytest
from click.testing import CliRunner

from envreport.click import toml_config_option
from typeguard import typechecked


def _write_contents(path: Path, contents: str) -> Path:
    path.write_text(contents)
    return path


@pytest.fixture
def main(tmp_path: Path) -> click.Command:
    config_path = _write_contents(
        tmp_path / "config.toml",
        """
        [main]
        foo = "hello, world!"
        not_an_option = 42

        [not-main]
        foo = "oops"
        """,
    )

    @click.command()
    @toml_config_option("main", default_config_path=config_path)
    @click.option("--foo", default="foo default")
    @click.option("--missing-in-config", type=int)
    def main(foo: Optional[str], missing_in_config: Optional[int]) -> None:
        print(foo)
        print(missing_in_config)

    return main


@pytest.mark.parametrize(
    "args, expected_stdout",
    [
        # passing no args should use the value in the default config
        ([], "hello, world!\nNone\n"),
        # the command line wins over the config
        (["--foo", "bar"], "bar\nNone\n"),
        # nonexistent config should be ignored and treated as an empty table
        (["--config", "/does/not/exist.toml"], "foo default\nNone\n"),
        # /dev/null is the same as a nonexistent config
        (["--config", "/dev/null"], "foo default\nNone\n"),
    ],
)
@typechecked
def test_uses_correct_value(
    main: click.Command, args: Sequence[str], expected_stdout: str
) -> None:
    runner = CliRunner()

    r = runner.invoke(main, list(args), catch_exceptions=False)

    assert r.exit_code == 0
    assert r.stdout == expected_stdout


def test_other_config_file(main: click.Command, tmp_path: Path) -> None:
    other = _write_contents(tmp_path / "other.toml", '[main]\nfoo = "baz"\n')
    runner = CliRunner()

    r = runner.invoke(main, ["--config", str(other)], catch_exceptions=False)

    assert r.stdout == "baz\nNone\n"


def test_missing_table(main: click.Command, tmp_path: Path) -> None:
    other = _write_contents(tmp_path / "other.toml", '[other]\nfoo = "baz"\n')
    runner = CliRunner()

    r = runner.invoke(main, ["--config", str(other)])

    assert r.exit_code == 2
    assert "'main' is not a top-level table name" in r.output
