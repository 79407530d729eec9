"""
File: course_admin/core/logging.py
Description: 全局日志配置模块 (Loguru)

本模块负责：
1. 接管标准库 logging (Uvicorn / FastAPI / SQLAlchemy / Alembic)，统一转发到 Loguru
2. 配置控制台与文件 Sink（开发环境彩色文本，生产环境 JSON）
3. 日志行附带 request_id 与业务上下文 (entity / id)，便于按请求或记录检索
4. 出口脱敏：bind() 进来的 password 等字段在写出前统一掩盖
"""

import logging
import sys
from pathlib import Path
from typing import Any

from loguru import logger

from course_admin.core.config import settings
from course_admin.utils.masking import mask_sensitive_data

# 需要接管的标准库日志命名空间 (按顶级包名匹配)
INTERCEPTED_LOGGERS: tuple[str, ...] = (
    "uvicorn",
    "fastapi",
    "starlette",
    "sqlalchemy",
    "alembic",
    "course_admin",
)


class InterceptHandler(logging.Handler):
    """
    将标准库 logging 记录转发到 Loguru 的 Handler。
    """

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # 回溯到真正的调用者栈帧，保证日志中的模块/行号正确
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            if frame.f_back:
                frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def mask_record_extra(record: dict[str, Any]) -> None:
    """Loguru patcher：写出前对 extra 中的敏感字段脱敏"""
    record["extra"].update(mask_sensitive_data(record["extra"]))


def format_record(record: dict[str, Any]) -> str:
    """
    文本格式化函数。
    extra 中存在 request_id / entity / id 时追加到行尾。
    """
    format_string = (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
        "<level>{message}</level>"
    )

    extra = record["extra"]
    if extra.get("request_id"):
        format_string += " | <magenta>req_id={extra[request_id]}</magenta>"
    if extra.get("entity"):
        format_string += " | <yellow>{extra[entity]}</yellow>"
        if extra.get("id"):
            format_string += "<yellow>#{extra[id]}</yellow>"

    format_string += "\n{exception}"
    return format_string


def _intercept_std_logging() -> None:
    logging.root.handlers = [InterceptHandler()]
    logging.root.setLevel(settings.LOG_LEVEL)

    for name in list(logging.root.manager.loggerDict.keys()):
        if name.split(".")[0] in INTERCEPTED_LOGGERS:
            logging.getLogger(name).handlers = []
            logging.getLogger(name).propagate = True


def _sink_config(**overrides: Any) -> dict[str, Any]:
    config: dict[str, Any] = {
        "level": settings.LOG_LEVEL,
        "enqueue": True,
        "backtrace": True,
        "diagnose": settings.LOG_DIAGNOSE,
    }
    if settings.LOG_JSON_FORMAT:
        config["serialize"] = True
    else:
        config["format"] = format_record
    config.update(overrides)
    return config


def setup_logging() -> None:
    """
    初始化日志配置。
    在应用 lifespan 启动阶段调用，可重复调用 (会先移除已有 sink)。
    """
    _intercept_std_logging()

    logger.remove()
    logger.configure(patcher=mask_record_extra)

    # Sink 1: 控制台
    logger.add(sys.stdout, **_sink_config(colorize=not settings.LOG_JSON_FORMAT))

    # Sink 2: 文件 (按配置启用)
    if settings.LOG_FILE_ENABLED:
        log_dir = Path(settings.LOG_DIR)
        log_dir.mkdir(parents=True, exist_ok=True)
        logger.add(
            str(log_dir / "course_admin_{time:YYYY-MM-DD_HH}.log"),
            **_sink_config(
                rotation=settings.LOG_ROTATION,
                retention=settings.LOG_RETENTION,
                compression=settings.LOG_COMPRESSION,
            ),
        )

    logger.bind(environment=settings.ENVIRONMENT).info("Logging configured successfully")
