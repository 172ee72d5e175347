"""Error response schema shared by every exception handler."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ErrorResponse(BaseModel):
    """Body returned for any non-2xx response."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    status: int
    error: str
    message: str | None = None
    path: str
    validation_errors: dict[str, str] | None = Field(
        default=None, description="Per-field messages (validation failures only)"
    )

    def to_content(self) -> dict:
        """Serialize with wire names, omitting absent optional members."""
        return self.model_dump(by_alias=True, exclude_none=True)
