import logging
import sys

formatter = logging.Formatter("%(name)-30s %(lineno)-4d %(levelname)-8s %(message)s")


class StdoutHandler(logging.StreamHandler):
    """总是写入当前的 sys.stdout，即使 sys.stdout 在配置之后被替换"""

    @property  # type: ignore[override]
    def stream(self):
        return sys.stdout

    @stream.setter
    def stream(self, value) -> None:
        pass


def config_logger(debug: bool = False) -> None:
    """配置日志

    调试模式下输出 DEBUG 级别日志到标准输出，否则只输出 WARNING 及以上。
    重复调用时会替换之前安装的 handler

    Args:
        debug (bool): 是否开启调试模式
    """
    # 根 logger
    logger = logging.getLogger("uidump_parser")
    for handler in list(logger.handlers):
        if isinstance(handler, StdoutHandler):
            logger.removeHandler(handler)

    std_handler = StdoutHandler()
    std_handler.setFormatter(formatter)

    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    logger.addHandler(std_handler)
