"""24位十六进制标识符的生成与校验

所有外部传入的id在进入数据仓库查询之前都需要经过这里的校验，
非法id统一替换为NULL_ID，使后续查询稳定地查不到数据，而不是抛出异常。
"""

import os
import random
import string
import threading
import time

ID_LENGTH = 24
NULL_ID = "0" * ID_LENGTH

_HEX_DIGITS = frozenset(string.hexdigits)
_PROCESS_UNIQUE = os.urandom(5).hex()
_COUNTER_MASK = 0xFFFFFF

_lock = threading.Lock()
_last_timestamp = -1
_counter = 0


def is_valid_id(value: object) -> bool:
    """判断传递的值是否为24位十六进制字符串"""
    if not isinstance(value, str) or len(value) != ID_LENGTH:
        return False
    return all(char in _HEX_DIGITS for char in value)


def sanitize_id(value: object) -> str:
    """将外部传入的id转换为可用于查询的id，非法id替换为NULL_ID"""
    if not is_valid_id(value):
        return NULL_ID
    return value.lower()


def new_object_id() -> str:
    """生成新的24位十六进制id

    结构: 4字节秒级时间戳 + 5字节进程随机值 + 3字节计数器，
    同一进程内生成的id按字典序单调递增。
    """
    global _last_timestamp, _counter

    with _lock:
        timestamp = int(time.time()) & 0xFFFFFFFF
        if timestamp != _last_timestamp:
            # 每一秒重新从低16位范围内的随机值开始计数，同一秒内超过约1600万个id才会回绕
            _last_timestamp = timestamp
            _counter = random.randint(0, 0xFFFF)
        else:
            _counter += 1
        counter = _counter & _COUNTER_MASK

    return f"{timestamp:08x}{_PROCESS_UNIQUE}{counter:06x}"
