from __future__ import annotations

from fastapi import Request

from .db import Database


def get_database(request: Request) -> Database:
    # create_app()이 넣어준 handle (테스트에서는 fake)
    return request.app.state.database
