"""单个文件的转换任务：计算输出路径、构造命令并调用外部工具。"""

from __future__ import annotations

import logging
import shlex
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Sequence

from image_resizer.core.exceptions import ConversionError
from image_resizer.core.models import FileOutcome

LOGGER = logging.getLogger(__name__)

# 输出格式 -> ffmpeg 编码器
FORMAT_CODECS = {
    "jpg": "mjpeg",
    "png": "png",
    "webp": "libwebp",
}

CommandRunner = Callable[[Sequence[str]], "subprocess.CompletedProcess[str]"]


@dataclass(frozen=True, slots=True)
class ConversionTask:
    """描述单个图片转换任务。"""

    source_name: str
    source_path: Path
    dest_path: Path
    width: int
    height: int = -1
    output_format: Optional[str] = None
    converter: str = "ffmpeg"


def destination_name(file_name: str, output_format: Optional[str] = None, prefix: str = "") -> str:
    """保持文件名主体；指定了输出格式时替换扩展名。"""

    name = f"{Path(file_name).stem}.{output_format}" if output_format else file_name
    return f"{prefix}{name}"


def build_command(task: ConversionTask) -> list[str]:
    """构造转换命令参数列表。"""

    command = [
        task.converter,
        "-y",
        "-hide_banner",
        "-loglevel",
        "error",
        "-i",
        str(task.source_path),
        "-vf",
        f"scale={task.width}:{task.height}",
    ]
    if task.output_format:
        command += ["-c:v", FORMAT_CODECS[task.output_format]]
    command.append(str(task.dest_path))
    return command


def run_command(command: Sequence[str]) -> "subprocess.CompletedProcess[str]":
    return subprocess.run(list(command), capture_output=True, text=True, check=False)


def run_task(task: ConversionTask, runner: CommandRunner = run_command) -> FileOutcome:
    """执行一次转换；失败时抛出 ``ConversionError``。"""

    command = build_command(task)
    LOGGER.debug("执行命令：%s", shlex.join(command))

    try:
        completed = runner(command)
    except OSError as exc:
        # 可执行文件不存在或无法启动
        raise ConversionError(task.source_name, str(exc)) from exc

    if completed.returncode != 0:
        detail = (completed.stderr or "").strip() or f"{task.converter} exited with status {completed.returncode}"
        raise ConversionError(task.source_name, detail)

    return FileOutcome(
        source_name=task.source_name,
        status="resized",
        output_path=task.dest_path,
        message=f"Resized {task.source_name} -> {task.dest_path}",
    )
