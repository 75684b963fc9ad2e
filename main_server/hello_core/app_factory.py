from __future__ import annotations

import os
import socket
from contextlib import asynccontextmanager
from typing import Optional

import pymysql
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .db import Database
from .log import get_logger, log_event
from .routers.hello import router as hello_router
from .routers.meta import router as meta_router
from .schema import ensure_schema

AUTO_SCHEMA = os.getenv("HELLO_AUTO_SCHEMA", "1") == "1"


def _best_effort_host_ip() -> str:
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as s:
            s.connect(("8.8.8.8", 80))
            return s.getsockname()[0]
    except OSError:
        return "0.0.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger = get_logger()
    logger.warning("========== HELLO FastAPI boot ==========")
    db: Database = app.state.database

    # 1) DB schema 준비 (실패해도 서버는 뜸 → 첫 요청이 migration 안내를 돌려줌)
    if app.state.auto_schema:
        try:
            ensure_schema(db)
            log_event("SERVER", "INFO", "SCHEMA_OK", "DB schema ensured", db=db)
        except pymysql.MySQLError as e:
            log_event("SERVER", "ERROR", "SCHEMA_FAIL", repr(e))

    # 2) 서버 켜짐 로그
    ip = _best_effort_host_ip()
    logger.warning("SERVER STARTED (visible log).")
    logger.warning("Hello API: http://%s:8000/api/hello  (health: /health)", ip)
    log_event("SERVER", "INFO", "SERVER_START", "FastAPI server started", db=db)

    try:
        yield
    finally:
        log_event("SERVER", "INFO", "SERVER_STOP", "FastAPI server stopped", db=db)
        logger.warning("========== HELLO FastAPI stopped ==========")


async def _invalid_body(request: Request, exc: RequestValidationError) -> JSONResponse:
    # 깨진 JSON 등도 {"error": ...} 형식으로
    log_event("API", "WARN", "BAD_REQUEST", f"{request.method} {request.url.path}: {exc.errors()!r}")
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


def create_app(database: Optional[Database] = None, auto_schema: bool = AUTO_SCHEMA) -> FastAPI:
    app = FastAPI(lifespan=lifespan)
    app.state.database = database if database is not None else Database()
    app.state.auto_schema = auto_schema

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, _invalid_body)

    app.include_router(hello_router)
    app.include_router(meta_router)

    return app
