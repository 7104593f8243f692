"""Tests for command line argument parser."""

import logging
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from headr.features.prefix import ByteCount, LineCount
from headr.ui.cli.args import (
    ArgumentParser,
    HeadArgs,
    parse_non_negative_int,
    parse_positive_int,
)


def test_parse_positive_int() -> None:
    """Positive integers parse; anything else reports the raw value."""

    assert parse_positive_int("7") == 7

    with pytest.raises(ValueError) as exc_info:
        _ = parse_positive_int("foo")
    assert str(exc_info.value) == "foo"

    with pytest.raises(ValueError) as exc_info:
        _ = parse_positive_int("0")
    assert str(exc_info.value) == "0"


def test_parse_non_negative_int() -> None:
    assert parse_non_negative_int("0") == 0
    assert parse_non_negative_int("12") == 12
    with pytest.raises(ValueError):
        _ = parse_non_negative_int("-1")


def test_create_parser_defaults() -> None:
    parsed = ArgumentParser.create_parser().parse_args([])

    assert parsed.files == []
    assert parsed.lines is None
    assert parsed.byte_count is None
    assert not parsed.verbose and not parsed.quiet


def test_create_parser_long_options() -> None:
    parser = ArgumentParser.create_parser()

    assert parser.parse_args(["--number", "3", "a"]).lines == 3
    assert parser.parse_args(["--lines", "4"]).lines == 4
    assert parser.parse_args(["--bytes", "0", "a", "b"]).byte_count == 0


def test_process_args_defaults_to_stdin_and_ten_lines(mocker: MockerFixture) -> None:
    mock_setup_logger = mocker.patch("headr.ui.cli.args.parser.setup_logger")

    args = ArgumentParser.process_args([])

    assert isinstance(args, HeadArgs)
    assert args.files == ["-"]
    assert args.to_config().selection == LineCount(10)
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.WARNING
    assert mock_setup_logger.call_args.kwargs["log_file"] is None


def test_process_args_byte_mode() -> None:
    args = ArgumentParser.process_args(["-c", "5", "a", "b"])

    config = args.to_config()
    assert config.sources == ("a", "b")
    assert config.selection == ByteCount(5)


@pytest.mark.parametrize(
    ("flags", "level"),
    [(["-v"], logging.DEBUG), (["--quiet"], logging.ERROR)],
)
def test_process_args_verbosity(flags: list[str], level: int, mocker: MockerFixture) -> None:
    mock_setup_logger = mocker.patch("headr.ui.cli.args.parser.setup_logger")

    _ = ArgumentParser.process_args(flags)

    assert mock_setup_logger.call_args.kwargs["console_level"] == level


def test_process_args_uses_configured_log_file(
    isolated_config: Path, mocker: MockerFixture
) -> None:
    log_file = isolated_config.parent / "headr.log"
    isolated_config.parent.mkdir(parents=True)
    _ = isolated_config.write_text(f'log_file = "{log_file}"\n', encoding="utf-8")
    mock_setup_logger = mocker.patch("headr.ui.cli.args.parser.setup_logger")

    _ = ArgumentParser.process_args(["a"])

    assert mock_setup_logger.call_args.kwargs["log_file"] == log_file


def test_conflicting_modes_are_rejected(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        _ = ArgumentParser.process_args(["-n", "5", "-c", "5"])

    assert exc_info.value.code == 2
    assert "not allowed with argument" in capsys.readouterr().err


@pytest.mark.parametrize("value", ["0", "-3", "ten"])
def test_invalid_line_count_is_rejected(value: str, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        _ = ArgumentParser.process_args([f"--number={value}"])

    assert exc_info.value.code == 2
    assert f"invalid line count: '{value}'" in capsys.readouterr().err


def test_invalid_byte_count_is_rejected(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit):
        _ = ArgumentParser.process_args(["--bytes=-1"])

    assert "invalid byte count: '-1'" in capsys.readouterr().err


def test_version_flag(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        _ = ArgumentParser.create_parser().parse_args(["--version"])

    assert exc_info.value.code == 0
    assert capsys.readouterr().out.startswith("headr ")
