"""命令行入口。"""

from __future__ import annotations

import logging
from typing import List, Optional

import click
import typer
from typer.core import TyperCommand

from image_resizer.core.arguments import generate_help_text, parse_arguments, validate_arguments
from image_resizer.core.config import ResizeJobConfig
from image_resizer.core.exceptions import ArgumentValidationError, ImageResizerError
from image_resizer.core.models import BatchResult
from image_resizer.processing.pipeline import resize_batch
from image_resizer.utils.colors import print_error, print_info, print_success
from image_resizer.utils.logging import setup_logging

PROGRAM_NAME = "image-resizer"

app = typer.Typer(help="Batch-resize the images of a folder with ffmpeg.", add_completion=False)


class RawTokensCommand(TyperCommand):
    """在 click 解析之前保存原始记号。

    ``--`` 与 ``--help`` 等记号需要原样交给参数表解析器。
    """

    def parse_args(self, ctx: click.Context, args: List[str]) -> List[str]:
        ctx.meta["raw_tokens"] = list(args)
        return super().parse_args(ctx, args)


def report_result(result: BatchResult, empty_message: Optional[str] = None) -> None:
    """逐行输出成功结果；没有图片时输出提示信息。"""

    if result.is_empty:
        print_info(empty_message or result.message or "")
        return
    for outcome in result.succeeded:
        print_success(outcome.message or f"Resized {outcome.source_name} -> {outcome.output_path}")


@app.command(
    "resize",
    cls=RawTokensCommand,
    context_settings={
        "ignore_unknown_options": True,
        "allow_extra_args": True,
        "help_option_names": [],
    },
)
def resize_cli(ctx: typer.Context) -> None:
    """把输入目录中的 JPG/PNG 图片按宽度缩放后写入输出目录。"""

    setup_logging()
    options = parse_arguments(ctx.meta.get("raw_tokens", []))
    logging.getLogger(__name__).debug("CLI 参数解析完成：%s", options)

    try:
        validate_arguments(options)
    except ArgumentValidationError as exc:
        print_error(str(exc), generate_help_text(PROGRAM_NAME))
        raise typer.Exit(code=1) from exc

    config = ResizeJobConfig.from_options(options)
    try:
        result = resize_batch(config)
    except ImageResizerError as exc:
        print_error(str(exc))
        raise typer.Exit(code=1) from exc

    report_result(result)


if __name__ == "__main__":
    app()
