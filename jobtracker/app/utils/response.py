"""
Standard JSON envelope: {success, data?, error?, message?}. Absent keys are omitted.
"""
from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def success(data: Any, status_code: int = 200) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": True, "data": jsonable_encoder(data)},
    )


def success_message(message: str) -> JSONResponse:
    return JSONResponse(content={"success": True, "message": message})


def error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})
