"""输入目录扫描与图片筛选逻辑。"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from image_resizer.core.config import IMAGE_EXTENSIONS
from image_resizer.core.exceptions import DirectoryReadError


def _matches_extension(name: str, extensions: Iterable[str]) -> bool:
    return Path(name).suffix.lower() in extensions


def list_image_files(input_dir: Path, extensions: Iterable[str] = IMAGE_EXTENSIONS) -> list[str]:
    """列出目录中扩展名匹配的图片文件名（不递归）。"""

    try:
        names = [entry.name for entry in input_dir.iterdir()]
    except OSError as exc:
        raise DirectoryReadError(f"Error reading folder: {exc}") from exc

    lowered = {ext.lower() for ext in extensions}
    matched = [name for name in names if _matches_extension(name, lowered)]
    matched.sort(key=str.lower)
    return matched
