from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse


class MockingApiError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code = 500

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class UserNotFoundError(MockingApiError):
    status_code = 404

    def __init__(self, user_id: int):
        super().__init__(f"User {user_id} not found")
        self.user_id = user_id


class GenerationLimitExceededError(MockingApiError):
    status_code = 400

    def __init__(self, requested: int, maximum: int):
        super().__init__(f"Cannot generate more than {maximum} users at once")
        self.requested = requested
        self.maximum = maximum


# ----------------------------
# Exception handlers
# ----------------------------
async def mocking_api_error_handler(request: Request, exc: MockingApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(MockingApiError, mocking_api_error_handler)
