"""Error details domain model."""

from pydantic import BaseModel, ConfigDict


class ErrorDetails(BaseModel):
    """Error payload returned to callers, with the HTTP status it maps to."""

    model_config = ConfigDict(frozen=True)

    status_code: int | None = None
    reason: str
