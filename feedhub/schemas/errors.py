"""Error response bodies."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Body of every non-2xx response. `errors` maps field paths to messages."""

    message: str
    errors: dict[str, str] | None = None
