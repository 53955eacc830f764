"""命令行参数的声明式定义、解析与校验。

参数表是一个有序元组，校验按声明顺序进行，因此多个字段同时出错时
报告的总是第一个。
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from image_resizer.core.exceptions import ArgumentValidationError

DEFAULT_SIZE = 350
SUPPORTED_FORMATS = ("jpg", "png", "webp")
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

Options = dict[str, Optional[str]]


@dataclass(frozen=True, slots=True)
class ArgumentDefinition:
    """单个命令行选项的描述。"""

    key: str
    variants: tuple[str, ...]
    description: str
    error_message: str
    required: bool = False
    default: Optional[str] = None


ARGUMENT_DEFINITIONS: tuple[ArgumentDefinition, ...] = (
    ArgumentDefinition(
        key="input",
        variants=("-i", "-input"),
        description="Input folder containing images to resize",
        error_message="Input folder is required. Use -i or -input to specify input folder.",
        required=True,
    ),
    ArgumentDefinition(
        key="output",
        variants=("-o", "-output"),
        description="Output folder where resized images will be saved",
        error_message="Output folder is required. Use -o or -output to specify output folder.",
        required=True,
    ),
    ArgumentDefinition(
        key="size",
        variants=("-s", "-size"),
        description="Target width in pixels, height keeps the aspect ratio",
        error_message="Size must be a positive number. Use -s or -size to specify width in pixels.",
        default=str(DEFAULT_SIZE),
    ),
    ArgumentDefinition(
        key="format",
        variants=("-f", "-format"),
        description=f"Output format ({', '.join(SUPPORTED_FORMATS)}), keeps the original format if omitted",
        error_message=(
            f"Format must be one of the supported formats: {', '.join(SUPPORTED_FORMATS)}."
        ),
    ),
)

_DEFINITIONS_BY_KEY = {definition.key: definition for definition in ARGUMENT_DEFINITIONS}


def _lookup(token: str) -> Optional[ArgumentDefinition]:
    for definition in ARGUMENT_DEFINITIONS:
        if token in definition.variants:
            return definition
    return None


def parse_arguments(tokens: Sequence[str]) -> Options:
    """将原始命令行记号解析为 ``{key: value}``。

    命中别名的记号与其后一个记号组成一对；未知记号被忽略且不占用取值位。
    末尾的标志没有取值时对应 ``None``。这里不做任何校验与默认值填充。
    """

    options: Options = {}
    index = 0
    while index < len(tokens):
        definition = _lookup(tokens[index])
        if definition is None:
            index += 1
            continue
        value_index = index + 1
        options[definition.key] = tokens[value_index] if value_index < len(tokens) else None
        index += 2
    return options


def validate_arguments(options: Mapping[str, Optional[str]]) -> None:
    """按声明顺序校验参数，遇到第一个错误即抛出 ``ArgumentValidationError``。"""

    for definition in ARGUMENT_DEFINITIONS:
        if definition.required and not options.get(definition.key):
            raise ArgumentValidationError(definition.error_message)

    size = options.get("size")
    if size:
        # 仅限 ASCII 十进制整数
        text = size.strip()
        if not _INTEGER_RE.fullmatch(text) or int(text) <= 0:
            raise ArgumentValidationError(_DEFINITIONS_BY_KEY["size"].error_message)

    # 显式给出的空字符串也算“已提供”，需要参与格式校验。
    fmt = options.get("format")
    if fmt is not None and fmt.lower() not in SUPPORTED_FORMATS:
        raise ArgumentValidationError(_DEFINITIONS_BY_KEY["format"].error_message)


def generate_help_text(program: str = "image-resizer") -> str:
    """根据参数表生成帮助文本（纯文本，着色由调用方负责）。"""

    lines = [f"Usage: {program} [options]", "", "Options:"]
    for definition in ARGUMENT_DEFINITIONS:
        variants = ", ".join(definition.variants)
        line = f"  {variants} <value>    {definition.description}"
        if definition.required:
            line += " (required)"
        elif definition.default is not None:
            line += f" (default: {definition.default})"
        lines.append(line)
    return "\n".join(lines) + "\n"
