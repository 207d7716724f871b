from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from typing import Any, Dict

from .db import get_connection
from .errors import ConnectionFailure
from .query import QueryRunner

app = FastAPI()

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------- 依赖：每个请求一个连接 ----------
def get_db():
    conn = get_connection()
    try:
        yield conn
    finally:
        conn.close()


@app.exception_handler(ConnectionFailure)
def connection_failure_handler(request: Request, exc: ConnectionFailure):
    print(f"[DB] {exc}")
    return JSONResponse(status_code=503, content={"status": "down", "error": str(exc)})


# ---------- API ----------
@app.get("/api/health")
def health(conn=Depends(get_db)) -> Dict[str, Any]:
    runner = QueryRunner(conn)
    runner.fetch_one("SELECT 1")
    database = runner.fetch_one("SELECT DATABASE()")[0]
    return {"status": "up", "database": database, "charset": runner.server_charset()}
