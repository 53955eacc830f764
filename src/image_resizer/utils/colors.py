"""终端着色输出工具。"""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.markup import escape

STYLES = {
    "error": "bold white on red",
    "success": "bold green",
    "info": "bold blue",
    "warning": "bold yellow",
}

console = Console(soft_wrap=True, highlight=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False)


def colorize(kind: str, text: str) -> str:
    """返回带 rich 标记的文本，``text`` 中的方括号会被转义。"""

    return f"[{STYLES[kind]}]{escape(text)}[/]"


def print_success(text: str) -> None:
    console.print(colorize("success", text))


def print_info(text: str) -> None:
    console.print(colorize("info", text))


def print_error(message: str, help_text: Optional[str] = None) -> None:
    err_console.print(f"{colorize('error', 'ERROR:')} {escape(message)}")
    if help_text:
        err_console.print(help_text, markup=False)
