# query.py
from typing import Any, Optional, Sequence

import pymysql


class QueryRunner:
    """持有外部传入的连接，不自己创建也不负责关闭"""

    def __init__(self, conn):
        self.conn = conn

    def fetch_all(self, sql: str, params: Optional[Sequence[Any]] = None):
        with self.conn.cursor() as cur:
            cur.execute(sql, params)
            return cur.fetchall()

    def fetch_one(self, sql: str, params: Optional[Sequence[Any]] = None):
        with self.conn.cursor() as cur:
            cur.execute(sql, params)
            return cur.fetchone()

    def execute(self, sql: str, params: Optional[Sequence[Any]] = None) -> int:
        try:
            with self.conn.cursor() as cur:
                affected = cur.execute(sql, params)
            self.conn.commit()
        except pymysql.err.MySQLError:
            self.conn.rollback()
            raise
        return affected

    def server_charset(self) -> str:
        row = self.fetch_one("SELECT @@character_set_connection")
        return row[0]
