"""Data models for the TransLink RTTI client."""

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError


class HttpResponse(BaseModel):
    """Raw result of a completed HTTP round trip."""

    status_code: int = Field(..., description="HTTP status code")
    content: str = Field("", description="Response body as text")
    url: str = Field("", description="Final URL after redirects")

    @property
    def ok(self) -> bool:
        """Whether the status code is in the 2xx range."""
        return 200 <= self.status_code < 300

    def json_content(self) -> Any:
        """Decode the body as JSON.

        Raises:
            ValueError: If the body is not valid JSON
        """
        return json.loads(self.content)


class ApiErrorPayload(BaseModel):
    """Error object returned by the RTTI API, e.g. ``{"Code": "3", "Message": "..."}``."""

    model_config = ConfigDict(populate_by_name=True)

    code: int = Field(0, alias="Code", description="API error code")
    message: str = Field("", alias="Message", description="API error message")

    @classmethod
    def from_content(cls, content: Any) -> "ApiErrorPayload | None":
        """Build a payload from decoded JSON if it describes an error.

        Returns None when the content is not an object carrying a ``Code`` field.
        """
        if not isinstance(content, dict) or "Code" not in content:
            return None

        message = content.get("Message")
        message = "" if message is None else str(message)
        try:
            return cls(code=content["Code"] or 0, message=message)
        except PydanticValidationError:
            # Non-numeric code, keep the message
            return cls(code=0, message=message)
