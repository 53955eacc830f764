"""核心数据模型定义。"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


@dataclass(slots=True)
class FileOutcome:
    """记录单个文件的转换结果。"""

    source_name: str
    status: str
    output_path: Optional[Path] = None
    message: Optional[str] = None


@dataclass(slots=True)
class BatchResult:
    """一次批处理的产出。

    没有可处理的图片时 ``succeeded`` 为空，``message`` 给出提示信息。
    """

    succeeded: list[FileOutcome] = field(default_factory=list)
    message: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not self.succeeded
