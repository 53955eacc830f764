"""App Store 截图批量缩放入口。"""

from __future__ import annotations

from pathlib import Path

import typer

from image_resizer.cli.main import report_result
from image_resizer.core.config import ResizeJobConfig
from image_resizer.core.exceptions import ImageResizerError
from image_resizer.processing.pipeline import resize_batch
from image_resizer.utils.colors import print_error
from image_resizer.utils.logging import setup_logging

SCREENSHOT_WIDTH = 1320
SCREENSHOT_HEIGHT = 2868
OUTPUT_PREFIX = "resized_"

app = typer.Typer(help="Resize PNG screenshots in place to a fixed App Store size.")


@app.command("screenshots")
def screenshots_cli(
    directory: Path = typer.Argument(..., help="包含 PNG 截图的目录"),
    width: int = typer.Option(SCREENSHOT_WIDTH, "--width", min=1, help="输出宽度"),
    height: int = typer.Option(SCREENSHOT_HEIGHT, "--height", min=1, help="输出高度"),
) -> None:
    """将目录中的 PNG 缩放到固定尺寸，结果以 ``resized_`` 前缀写在原目录。"""

    setup_logging()
    target = directory.expanduser().resolve()
    if not target.is_dir():
        print_error("Provided path is not a directory.")
        raise typer.Exit(code=1)

    config = ResizeJobConfig(
        input_dir=target,
        output_dir=target,
        width=width,
        height=height,
        extensions=frozenset({".png"}),
        name_prefix=OUTPUT_PREFIX,
    )
    try:
        result = resize_batch(config)
    except ImageResizerError as exc:
        print_error(str(exc))
        raise typer.Exit(code=1) from exc

    report_result(result, empty_message="No PNG images found in folder.")


if __name__ == "__main__":
    app()
