import logging
import sys

from core.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging() -> None:
    """设置应用程序的日志记录配置。

    根据应用程序的配置设置初始化根日志记录器，重复调用不会重复添加处理器。
    """
    settings = get_settings()
    root_logger = logging.getLogger()

    # 1.设置日志级别
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)
    root_logger.setLevel(log_level)

    # 2.已经添加过控制台处理器时只更新级别
    for handler in root_logger.handlers:
        if getattr(handler, "_files_manager_console", False):
            handler.setLevel(log_level)
            return

    # 3.创建控制台处理器并设置格式
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    console_handler.setLevel(log_level)
    console_handler._files_manager_console = True
    root_logger.addHandler(console_handler)

    # 4.降低第三方库的日志噪音
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    root_logger.info("日志记录器已初始化，日志级别: %s", settings.log_level)
