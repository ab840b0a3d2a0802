"""Tests for the ``rfcs generate`` command."""

from __future__ import annotations

import typing as typ

import pytest

from rfc_assembler import cli
from rfc_assembler.errors import StructuralError

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from pytest_mock import MockerFixture


def test_generate_prints_written_paths(
    rfc_project: cabc.Callable[..., Path],
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    config_path = rfc_project()
    monkeypatch.chdir(config_path.resolve().parent)

    cli.generate(config=config_path)

    assert capsys.readouterr().out.splitlines() == [
        "wrote README.md",
        "wrote rfcs/toc.md",
        "wrote rfcs/overview.md",
        "wrote rfcs/design.md",
    ]


def test_generate_honours_explicit_root(
    rfc_project: cabc.Callable[..., Path], tmp_path: Path, mocker: MockerFixture
) -> None:
    config_path = rfc_project()
    moved = tmp_path / "config" / "rfcs.yaml"
    moved.parent.mkdir()
    config_path.rename(moved)
    mocker.patch("builtins.print")

    cli.generate(config=moved, root=tmp_path)

    assert (tmp_path / "rfcs" / "design.md").exists()


def test_generate_verbose_configures_logging(
    rfc_project: cabc.Callable[..., Path], mocker: MockerFixture
) -> None:
    basic_config = mocker.patch("rfc_assembler.cli.logging.basicConfig")
    mocker.patch("builtins.print")

    cli.generate(config=rfc_project(), verbose=True)

    basic_config.assert_called_once_with(level=cli.logging.INFO, format=cli.LOG_FORMAT)


def test_generate_propagates_structural_errors(
    rfc_project: cabc.Callable[..., Path],
) -> None:
    config_path = rfc_project(fragments={"overview.md": "## Goals\n"})
    with pytest.raises(StructuralError):
        cli.generate(config=config_path)
