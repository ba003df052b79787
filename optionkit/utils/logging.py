"""
# 日志输出模块 (Log Output Module)
#
# 本文件负责把optionkit包的日志写入文件，只在调用方显式要求时生效：
#
# 1. get_logger：为指定名称的日志记录器挂载唯一的文件输出
#    - 先关闭并移除该记录器上已有的处理器，重复调用不会叠加
#    - 自动创建日志文件所在目录
#    - 不挂载控制台输出，库本身从不向stderr写日志
#
# 与其他组件的关系：
# - 被optionkit/config.py中的LoggingConfig.setup()使用
"""
import logging
import os


LOG_FORMAT = "%(asctime)s-%(name)s-%(levelname)s-%(message)s"


def get_logger(name: str, file_path: str) -> logging.Logger:
    directory = os.path.dirname(file_path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    file_handler = logging.FileHandler(file_path)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(file_handler)
    return logger
