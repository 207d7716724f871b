# errors.py
from typing import Optional


class ConnectionFailure(Exception):
    """连接 MySQL 失败（或设置字符集失败）"""

    def __init__(self, reason: str, code: Optional[int] = None):
        self.reason = reason
        self.code = code
        super().__init__(f"Database connection failed: {reason}")
