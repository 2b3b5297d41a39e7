"""Interface layer errors."""

from typing import Mapping

from fastapi import Request
from fastapi.responses import JSONResponse


class InterfaceError(Exception):
    """Base interface error."""

    pass


class APIError(InterfaceError):
    """Error returned to the client as a bare ``{key: message}`` JSON body.

    Attributes:
        status_code: HTTP status code
        errors: Response body, mapping an error key to its message
    """

    def __init__(self, status_code: int, errors: Mapping[str, str]):
        self.status_code = status_code
        self.errors = dict(errors)
        super().__init__(f"{status_code}: {self.errors}")


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """Render an APIError as its error map."""
    return JSONResponse(status_code=exc.status_code, content=exc.errors)
