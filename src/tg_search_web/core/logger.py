"""
日志配置

根 logger 只配置一次：coloredlogs 控制台输出，外加可选的文件输出（TGWEB_LOG_FILE）
"""

import logging
from pathlib import Path

import coloredlogs

from tg_search_web.config.settings import LOG_FILE, LOGGING2FILE_LEVEL, LOGGING_LEVEL

NOTICE = 25
LOG_FORMAT = "%(asctime)s - %(name)s - %(funcName)s - %(levelname)s - %(message)s"
CONSOLE_LEVEL_STYLES = dict(
    debug=dict(color="cyan"),
    info=dict(color="green"),
    notice=dict(color="magenta"),
    warning=dict(color="yellow"),
    error=dict(color="red"),
    critical=dict(color="red", bold=True),
)

_ROOT_CONFIGURED = False


def _attach_file_handler(root: logging.Logger, log_file: str) -> None:
    target = str(Path(log_file).resolve())
    if any(isinstance(h, logging.FileHandler) and h.baseFilename == target for h in root.handlers):
        return
    handler = logging.FileHandler(target, encoding="utf-8")
    handler.setLevel(LOGGING2FILE_LEVEL)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)


def setup_logger(name: str | None = None, log_file: str | None = LOG_FILE) -> logging.Logger:
    """
    Configure the root logger on first call and return ``name``'s logger (root when omitted).

    Modules call this at import time; later calls only look up the logger.
    """
    global _ROOT_CONFIGURED

    root = logging.getLogger()
    if not _ROOT_CONFIGURED:
        logging.addLevelName(NOTICE, "NOTICE")
        if log_file:
            _attach_file_handler(root, log_file)
        coloredlogs.install(level=LOGGING_LEVEL, level_styles=CONSOLE_LEVEL_STYLES, fmt=LOG_FORMAT)
        _ROOT_CONFIGURED = True

    return logging.getLogger(name) if name else root
