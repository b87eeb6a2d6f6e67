"""Error envelope returned by every non-2xx response.

Shape: {"error": {"code": "invalid_page_request", "message": "size must be <= 100, got 500"}}.
The exception handlers in main.py are the only producers.
"""

from pydantic import BaseModel


class ErrorDetail(BaseModel):
    code: str  # machine-readable, snake_case
    message: str  # safe to show to API clients


class ErrorResponse(BaseModel):
    error: ErrorDetail
