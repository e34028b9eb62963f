from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """接口层基础模型，字段在JSON中使用驼峰命名"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorResponse(BaseModel):
    """错误响应结构，所有业务异常都以 {"error": msg} 的形式返回"""

    error: str
