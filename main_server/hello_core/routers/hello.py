from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..db import Database
from ..deps import get_database
from ..errors import StorageError, ValidationError
from ..log import log_event
from ..repository import MessageRepository
from ..service import HelloService

router = APIRouter(prefix="/api", tags=["hello"])


class HelloIn(BaseModel):
    # 타입 체크는 handler에서 직접 (400 응답 형식을 맞추기 위해)
    content: Optional[Any] = None


def _service(db: Database) -> HelloService:
    return HelloService(MessageRepository(db))


def _error(status: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status, content={"error": message})


@router.get("/hello")
def get_hello(db: Database = Depends(get_database)):
    try:
        message = _service(db).get_message()
    except StorageError as e:
        log_event("API", "ERROR", "HELLO_FAIL", f"GET /api/hello: {e.message}")
        return _error(500, e.message)
    except Exception as e:
        log_event("API", "ERROR", "HELLO_FAIL", f"GET /api/hello: {e!r}")
        return _error(500, "Failed to fetch hello message")

    return {"message": message}


@router.post("/hello")
def post_hello(
    body: Optional[HelloIn] = None,
    db: Database = Depends(get_database),
):
    content = body.content if body is not None else None

    # storage는 건드리지 않고 바로 400
    if not content:
        return _error(400, "Content is required")
    if not isinstance(content, str):
        return _error(400, "Content must be a string")

    try:
        message = _service(db).set_message(content)
    except ValidationError as e:
        return _error(400, e.message)
    except StorageError as e:
        log_event("API", "ERROR", "HELLO_FAIL", f"POST /api/hello: {e.message}")
        return _error(500, e.message)
    except Exception as e:
        log_event("API", "ERROR", "HELLO_FAIL", f"POST /api/hello: {e!r}")
        return _error(500, "Failed to create/update hello message")

    log_event("API", "INFO", "HELLO_SET", f"len={len(message)}")
    return {"message": message}
