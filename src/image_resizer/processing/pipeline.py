"""处理流水线：扫描输入目录，并发调用外部转换工具并汇总结果。"""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from typing import Optional

from image_resizer.core.config import ResizeJobConfig
from image_resizer.core.exceptions import ConversionError, OutputDirectoryError
from image_resizer.core.models import BatchResult, FileOutcome
from image_resizer.core.scanner import list_image_files
from image_resizer.processing.worker import (
    CommandRunner,
    ConversionTask,
    destination_name,
    run_command,
    run_task,
)

LOGGER = logging.getLogger(__name__)

NO_IMAGES_MESSAGE = "No JPG or PNG images found in folder."


def resize_batch(config: ResizeJobConfig, runner: Optional[CommandRunner] = None) -> BatchResult:
    """批量转换入口。

    每个文件一个任务，全部同时派发后统一等待。任一任务失败时抛出最先
    完成的那个 ``ConversionError``；其余已派发的任务继续运行到结束，
    但结果不再收集，已写出的文件也不会回滚。
    """

    runner = runner or run_command
    try:
        config.output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputDirectoryError(f"Error creating folder: {exc}") from exc

    LOGGER.info("开始扫描输入目录：%s", config.input_dir)
    files = list_image_files(config.input_dir, config.extensions)
    LOGGER.info("发现 %d 个候选图片文件", len(files))

    if not files:
        return BatchResult(message=NO_IMAGES_MESSAGE)

    tasks = [_make_task(config, name) for name in files]

    # 不限制并发数量：每个文件一个线程，各自等待外部进程。
    executor = ThreadPoolExecutor(max_workers=len(tasks), thread_name_prefix="resize")
    future_map: dict[Future[FileOutcome], ConversionTask] = {
        executor.submit(run_task, task, runner): task for task in tasks
    }
    outcomes: dict[str, FileOutcome] = {}
    try:
        for future in as_completed(future_map):
            task = future_map[future]
            try:
                outcomes[task.source_name] = future.result()
            except ConversionError as exc:
                LOGGER.error("转换失败：%s", exc)
                raise
    finally:
        executor.shutdown(wait=False)

    return BatchResult(succeeded=[outcomes[task.source_name] for task in tasks])


def _make_task(config: ResizeJobConfig, file_name: str) -> ConversionTask:
    return ConversionTask(
        source_name=file_name,
        source_path=config.input_dir / file_name,
        dest_path=config.output_dir / destination_name(file_name, config.output_format, config.name_prefix),
        width=config.width,
        height=config.height,
        output_format=config.output_format,
        converter=config.converter,
    )
