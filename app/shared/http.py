from fastapi.responses import JSONResponse
from typing import Any, Optional

def ok(data: Any = None, **extra):
    return {"success": True, "data": data, **extra}

def fail(message: str, status: int = 400, details: Optional[Any] = None) -> JSONResponse:
    body = {"success": False, "error": message}
    if details is not None:
        body["details"] = details
    return JSONResponse(status_code=status, content=body)

def error_body(message: str, status: int) -> JSONResponse:
    return JSONResponse(status_code=status, content={"error": message})
