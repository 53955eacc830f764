"""测试命令行参数的解析、校验与帮助文本。"""

from __future__ import annotations

import pytest

from image_resizer.core.arguments import (
    ARGUMENT_DEFINITIONS,
    generate_help_text,
    parse_arguments,
    validate_arguments,
)
from image_resizer.core.config import ResizeJobConfig
from image_resizer.core.exceptions import ArgumentValidationError

INPUT_REQUIRED = "Input folder is required. Use -i or -input to specify input folder."
OUTPUT_REQUIRED = "Output folder is required. Use -o or -output to specify output folder."
SIZE_INVALID = "Size must be a positive number"
FORMAT_INVALID = "Format must be one of the supported formats"


def test_definitions_are_ordered_with_disjoint_aliases() -> None:
    assert [d.key for d in ARGUMENT_DEFINITIONS] == ["input", "output", "size", "format"]

    seen: set[str] = set()
    for definition in ARGUMENT_DEFINITIONS:
        assert seen.isdisjoint(definition.variants)
        seen.update(definition.variants)

    required = {d.key for d in ARGUMENT_DEFINITIONS if d.required}
    assert required == {"input", "output"}


@pytest.mark.parametrize(
    "tokens",
    [
        ["-i", "/in", "-o", "/out"],
        ["-input", "/in", "-output", "/out"],
        ["-i", "/in", "-output", "/out"],
    ],
)
def test_parse_short_and_long_aliases(tokens: list[str]) -> None:
    assert parse_arguments(tokens) == {"input": "/in", "output": "/out"}


def test_parse_all_options() -> None:
    tokens = ["-i", "/in", "-o", "/out", "-size", "500", "-f", "webp"]
    assert parse_arguments(tokens) == {"input": "/in", "output": "/out", "size": "500", "format": "webp"}


def test_parse_empty_tokens() -> None:
    assert parse_arguments([]) == {}


def test_unknown_tokens_consume_no_value() -> None:
    tokens = ["-i", "/in", "-unknown", "value", "-o", "/out"]
    assert parse_arguments(tokens) == {"input": "/in", "output": "/out"}

    # 未知标志后面紧跟的已知标志仍然生效
    assert parse_arguments(["--verbose", "-o", "/out"]) == {"output": "/out"}


def test_trailing_flag_without_value() -> None:
    assert parse_arguments(["-o", "/out", "-i"]) == {"output": "/out", "input": None}


def test_parse_keeps_raw_strings() -> None:
    options = parse_arguments(["-s", " 0042 ", "-f", "JPG"])
    assert options == {"size": " 0042 ", "format": "JPG"}


def test_flag_value_may_look_like_a_flag() -> None:
    assert parse_arguments(["-i", "-o", "/out"]) == {"input": "-o"}
    assert parse_arguments(["-i", "--", "-o", "/out", "--help"]) == {"input": "--", "output": "/out"}


def test_validate_accepts_complete_options() -> None:
    validate_arguments({"input": "/in", "output": "/out"})
    validate_arguments({"input": "/in", "output": "/out", "size": "500", "format": "JPG"})


@pytest.mark.parametrize(
    ("options", "message"),
    [
        ({"output": "/out"}, INPUT_REQUIRED),
        ({"input": "", "output": "/out"}, INPUT_REQUIRED),
        ({"input": None, "output": "/out"}, INPUT_REQUIRED),
        ({"input": "/in"}, OUTPUT_REQUIRED),
        ({"input": "/in", "output": ""}, OUTPUT_REQUIRED),
        ({}, INPUT_REQUIRED),
    ],
)
def test_validate_required_fields(options: dict, message: str) -> None:
    with pytest.raises(ArgumentValidationError) as excinfo:
        validate_arguments(options)
    assert str(excinfo.value) == message


@pytest.mark.parametrize("size", ["0", "-100", "abc", "1.5", "1_000", "\u0665", "12px"])
def test_validate_rejects_invalid_size(size: str) -> None:
    with pytest.raises(ArgumentValidationError, match=SIZE_INVALID):
        validate_arguments({"input": "/in", "output": "/out", "size": size})


@pytest.mark.parametrize("size", ["500", " 42 ", "+7"])
def test_validate_accepts_plain_integers(size: str) -> None:
    validate_arguments({"input": "/in", "output": "/out", "size": size})


def test_validate_ignores_empty_size() -> None:
    validate_arguments({"input": "/in", "output": "/out", "size": ""})


@pytest.mark.parametrize("fmt", ["gif", "", "jpeg"])
def test_validate_rejects_unsupported_format(fmt: str) -> None:
    with pytest.raises(ArgumentValidationError, match=FORMAT_INVALID):
        validate_arguments({"input": "/in", "output": "/out", "format": fmt})


@pytest.mark.parametrize("fmt", ["jpg", "JPG", "Png", "webp"])
def test_validate_format_is_case_insensitive(fmt: str) -> None:
    validate_arguments({"input": "/in", "output": "/out", "format": fmt})


def test_validation_order_is_pinned() -> None:
    with pytest.raises(ArgumentValidationError, match="Output folder"):
        validate_arguments({"input": "/in", "size": "abc", "format": "gif"})

    with pytest.raises(ArgumentValidationError, match=SIZE_INVALID):
        validate_arguments({"input": "/in", "output": "/out", "size": "abc", "format": "gif"})


def test_help_text_lists_every_option() -> None:
    text = generate_help_text("image-resizer")

    assert "Usage: image-resizer [options]" in text
    assert "Options:" in text
    assert "-i, -input <value>" in text
    assert "-o, -output <value>" in text
    for definition in ARGUMENT_DEFINITIONS:
        assert ", ".join(definition.variants) in text
        assert definition.description in text
    assert "(default: 350)" in text


def test_config_from_options_applies_defaults() -> None:
    config = ResizeJobConfig.from_options({"input": "/in", "output": "/out"})

    assert str(config.input_dir) == "/in"
    assert str(config.output_dir) == "/out"
    assert config.width == 350
    assert config.height == -1
    assert config.output_format is None


def test_config_from_options_normalizes_values() -> None:
    config = ResizeJobConfig.from_options({"input": "/in", "output": "/out", "size": " 500 ", "format": "WEBP"})

    assert config.width == 500
    assert config.output_format == "webp"
