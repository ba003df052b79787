"""
# 配置模块 (Configuration Module)
#
# 本文件为使用optionkit的应用提供可选的日志配置。导入本模块不会读取任何文件，
# 也不会修改环境变量；只有显式构造Config时才会加载.env。主要内容包括：
#
# 1. LoggingConfig：日志配置
#    - 日志级别与可选的日志文件，默认值来自环境变量
#    - setup()只作用于optionkit包自身的日志记录器
#
# 2. Config：全局配置管理器
#    - 构造时加载.env（显式路径，或从当前工作目录向上查找）
#    - 随后应用日志配置
#
# 与其他组件的关系：
# - 使用optionkit/utils/logging.py为日志记录器挂载文件输出
# - optionkit/option.py不依赖本模块，容器行为不受任何配置影响
"""
import os
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from dotenv import find_dotenv, load_dotenv

from optionkit.utils.logging import get_logger

PACKAGE_LOGGER_NAME = "optionkit"


@dataclass
class LoggingConfig:
    """Logging configuration"""
    level: str = field(default_factory=lambda: os.getenv('OPTIONKIT_LOG_LEVEL', 'WARNING'))
    file: str = field(default_factory=lambda: os.getenv('OPTIONKIT_LOG_FILE', ''))

    @property
    def numeric_level(self) -> int:
        level = getattr(logging, self.level.upper(), None)
        return level if isinstance(level, int) else logging.WARNING

    def setup(self) -> logging.Logger:
        """Configure the package logger, leaving the root logger alone"""
        if self.file:
            logger = get_logger(PACKAGE_LOGGER_NAME, self.file)
        else:
            logger = logging.getLogger(PACKAGE_LOGGER_NAME)
        logger.setLevel(self.numeric_level)
        return logger


class Config:
    """Global configuration manager"""

    def __init__(self, env_file: Optional[str] = None):
        # Load environment variables
        load_dotenv(env_file or find_dotenv(usecwd=True))
        self.logging = LoggingConfig()

        # Setup logging
        self.logging.setup()

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary"""
        return {
            'logging': {
                'level': self.logging.level,
                'file': self.logging.file or None
            }
        }
