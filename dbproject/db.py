# db.py
import sys
from typing import Any, Dict, Optional, Tuple

import pymysql
from pymysql.charset import charset_by_name
from .config import MYSQL_HOST, MYSQL_PORT, MYSQL_USER, MYSQL_PASSWORD, MYSQL_DB, MYSQL_CHARSET
from .errors import ConnectionFailure


def _driver_error(e: pymysql.err.MySQLError) -> Tuple[Optional[int], str]:
    # pymysql 的异常参数一般是 (errno, message)
    if len(e.args) >= 2 and isinstance(e.args[0], int):
        return e.args[0], str(e.args[1])
    return None, str(e)


def _close_quietly(conn):
    # 失败路径上关闭，关闭本身出错只打印
    try:
        conn.close()
    except pymysql.err.Error as e:
        print(f"[DB] close after failed charset setup: {e}")


def open_connection(host, user, password, database, port=3306, charset="utf8mb4"):
    """打开连接并设置字符集；失败时抛出 ConnectionFailure，不会返回半初始化的连接"""
    try:
        conn = pymysql.connect(
            host=host,
            port=port,
            user=user,
            password=password,
            database=database,
        )
    except pymysql.err.MySQLError as e:
        code, reason = _driver_error(e)
        raise ConnectionFailure(reason, code) from e
    except UnicodeError as e:
        # 密码等无法按 latin-1 编码
        raise ConnectionFailure(str(e)) from e

    # pymysql 对未知字符集不会抛 MySQLError，先自己查表
    if charset_by_name(charset) is None:
        _close_quietly(conn)
        raise ConnectionFailure(f"Unknown character set: '{charset}'")

    try:
        conn.set_character_set(charset)
    except pymysql.err.MySQLError as e:
        _close_quietly(conn)
        code, reason = _driver_error(e)
        raise ConnectionFailure(reason, code) from e
    return conn


def get_connection():
    return open_connection(
        host=MYSQL_HOST,
        port=MYSQL_PORT,
        user=MYSQL_USER,
        password=MYSQL_PASSWORD,
        database=MYSQL_DB,
        charset=MYSQL_CHARSET,
    )


def connect_or_exit():
    """连接失败直接退出进程（exit status 1）"""
    try:
        return get_connection()
    except ConnectionFailure as e:
        print(f"[DB] {e}", file=sys.stderr)
        sys.exit(1)


def describe_connection(conn) -> Dict[str, Any]:
    # 不输出密码
    user, database = conn.user, conn.db
    # 登录后 pymysql 会把 user/db 编码成 bytes
    if isinstance(user, bytes):
        user = user.decode(conn.encoding)
    if isinstance(database, bytes):
        database = database.decode(conn.encoding)
    return {
        "host": conn.host,
        "port": conn.port,
        "user": user,
        "database": database,
        "charset": conn.charset,
        "open": conn.open,
    }
