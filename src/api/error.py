"""HTTP error mapping

Routes raise ClientError with a use case Error; the handlers below render
every error as {"error": {"code", "message", "reason"}}.
"""

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from libs.result import Error

STATUS_BY_CODE = {
    "ACCOUNT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "LISTING_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "CATEGORY_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "INVALID_ROLE": status.HTTP_400_BAD_REQUEST,
    "NOT_APPROVED": status.HTTP_403_FORBIDDEN,
    "DENIED": status.HTTP_403_FORBIDDEN,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "ACCOUNT_EXISTS": status.HTTP_409_CONFLICT,
    "CATEGORY_EXISTS": status.HTTP_409_CONFLICT,
}


class ClientError(Exception):

    def __init__(self, error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(error.message)
        self.error = error
        self.status_code = status_code

    @classmethod
    def from_error(cls, error: Error) -> "ClientError":
        return cls(error, status_code=STATUS_BY_CODE.get(error.code, status.HTTP_400_BAD_REQUEST))


async def client_error_handler(request: Request, exc: ClientError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.error.model_dump()},
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Invalid request parameters",
                "reason": str(exc.errors()),
            }
        },
    )
