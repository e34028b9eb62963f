from typing import Any


class AppException(RuntimeError):
    """基础应用异常类，继承RuntimeError"""

    def __init__(
        self,
        status_code: int = 400,
        msg: str = "Application error",
        data: Any = None,
    ):
        """构造函数，完成错误数据初始化"""
        self.status_code = status_code
        self.msg = msg
        self.data = data
        super().__init__(msg)


class ValidationError(AppException):
    """请求字段缺失/非法或层级约束被破坏，消息原样返回给调用方"""

    def __init__(self, msg: str = "Bad request", data: Any = None):
        super().__init__(status_code=400, msg=msg, data=data)


class InvalidOperationError(AppException):
    """当前实体类型不支持该操作，例如读取文件夹的内容"""

    def __init__(self, msg: str = "Invalid operation"):
        super().__init__(status_code=400, msg=msg)


class UnauthorizedError(AppException):
    """未提供认证信息或认证信息无效"""

    def __init__(self, msg: str = "Unauthorized"):
        super().__init__(status_code=401, msg=msg)


class NotFoundError(AppException):
    """资源未找到异常，不区分资源不存在与资源存在但无权访问"""

    def __init__(self, msg: str = "Not found"):
        super().__init__(status_code=404, msg=msg)
