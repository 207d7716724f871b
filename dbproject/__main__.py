# python -m dbproject
from .db import connect_or_exit, describe_connection


def main() -> int:
    conn = connect_or_exit()
    try:
        info = describe_connection(conn)
        print(f"[DB] connected to {info['database']}@{info['host']} (charset={info['charset']})")
    finally:
        conn.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
