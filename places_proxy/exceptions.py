"""Error envelope shared by the API routers."""
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class ApiError(Exception):
    """Error rendered to the client as ``{"error": ..., "details": ..., "hint": ...}``."""

    def __init__(
        self,
        status_code: int,
        error: str,
        details: Any = None,
        hint: Optional[str] = None,
    ) -> None:
        super().__init__(error)
        self.status_code = status_code
        self.error = error
        self.details = details
        self.hint = hint

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"error": self.error}
        if self.details is not None:
            body["details"] = self.details
        if self.hint:
            body["hint"] = self.hint
        return body


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=jsonable_encoder(exc.to_dict()))


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report schema failures with the same envelope as the routers."""
    error = ApiError(400, "Invalid request body", details=exc.errors())
    return JSONResponse(status_code=400, content=jsonable_encoder(error.to_dict()))
