"""批处理任务的配置模型。"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

from image_resizer.core.arguments import DEFAULT_SIZE

IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png"})


@dataclass(frozen=True, slots=True)
class ResizeJobConfig:
    """单次批处理任务的配置集合。"""

    input_dir: Path
    output_dir: Path
    width: int = DEFAULT_SIZE
    height: int = -1  # -1 交给转换工具按宽高比计算
    output_format: Optional[str] = None
    extensions: frozenset[str] = field(default=IMAGE_EXTENSIONS)
    name_prefix: str = ""
    converter: str = "ffmpeg"

    @classmethod
    def from_options(cls, options: Mapping[str, Optional[str]], converter: str = "ffmpeg") -> "ResizeJobConfig":
        """由已通过校验的参数构建配置，未提供的字段使用默认值。"""

        size = options.get("size")
        fmt = options.get("format")
        return cls(
            input_dir=Path(options["input"]),
            output_dir=Path(options["output"]),
            width=int(size.strip()) if size else DEFAULT_SIZE,
            output_format=fmt.lower() if fmt else None,
            converter=converter,
        )
