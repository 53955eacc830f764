"""项目内使用的自定义异常定义。"""


class ImageResizerError(Exception):
    """基础异常类型。"""


class ArgumentValidationError(ImageResizerError):
    """命令行参数不合法时抛出。"""


class DirectoryReadError(ImageResizerError):
    """输入目录无法读取时抛出，整批任务终止。"""


class ConversionError(ImageResizerError):
    """单个文件的外部转换失败。"""

    def __init__(self, file_name: str, detail: str) -> None:
        super().__init__(f"Error resizing {file_name}: {detail}")
        self.file_name = file_name
        self.detail = detail


class OutputDirectoryError(ImageResizerError):
    """输出目录无法创建时抛出，整批任务终止。"""
