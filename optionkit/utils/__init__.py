"""
# 工具模块初始化文件 (Utilities Module Initialization)
#
# - get_logger：为optionkit的日志记录器挂载文件输出
"""
from .logging import get_logger
