from pydantic import BaseModel


class FileContent(BaseModel):
    """文件内容解析结果，供接口层以流的形式返回文件"""

    path: str  # 磁盘中的文件路径(可能是带尺寸后缀的缩略图)
    mime_type: str  # mime-type类型
    size: int  # 文件大小，单位为字节
