"""
# 可选值异常模块 (Option Exception Module)
#
# 本文件定义了Option容器唯一可能抛出的异常类型。主要内容包括：
#
# 1. AbsentValueError：值缺失异常
#    - 仅由expect / unwrap在空容器上调用时抛出
#    - 继承自ValueError，提供更具体的异常类型
#    - 异常信息即调用方传入的提示文本
#
# 与其他组件的关系：
# - 被optionkit/option.py使用，标识"断言存在"失败的情况
# - 其他所有操作均为全函数，不会抛出此异常
"""
class AbsentValueError(ValueError):
    pass
