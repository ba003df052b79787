"""
# optionkit包初始化文件 (Package Initialization)
#
# 本文件导出最常用的接口，使它们可以直接从optionkit包中导入：
#
# - Option：可选值容器
# - some / none：创建存在值或空值的Option实例
# - AbsentValueError：expect / unwrap在空容器上抛出的异常
"""
from .exception import AbsentValueError
from .option import Option, some, none

__all__ = ["Option", "some", "none", "AbsentValueError"]
__version__ = "0.1.0"
