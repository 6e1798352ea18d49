"""
Transport-neutral request and response models.

The hosting HTTP runtime converts its own request into a `Request`, hands it
to `RequestRouter.route` and writes the returned `Response` back out.
"""
import json
from typing import Any, Optional, Union
from pydantic import Field

from catgql.core.common import AppBaseModel

JSON_CONTENT_TYPE = "application/json"
TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"


class Request(AppBaseModel):
    method: str = Field(..., description="HTTP method, e.g. GET or POST")
    path: str = Field(..., description="Request path, matched exactly")
    body: Optional[Union[bytes, str]] = Field(default=None, description="Raw request payload")


class Response(AppBaseModel):
    status_code: int = 200
    content_type: str = JSON_CONTENT_TYPE
    body: str = ""

    @classmethod
    def json_body(cls, payload: Any, status_code: int = 200) -> "Response":
        return cls(
            status_code=status_code,
            content_type=JSON_CONTENT_TYPE,
            body=json.dumps(payload, ensure_ascii=False),
        )

    @classmethod
    def plain_text(cls, text: str, status_code: int = 200) -> "Response":
        return cls(status_code=status_code, content_type=TEXT_CONTENT_TYPE, body=text)

    @classmethod
    def error(cls, message: str, status_code: int = 400) -> "Response":
        return cls.json_body({"error": message}, status_code=status_code)

    def payload(self) -> Any:
        """Parse the body back to JSON."""
        return json.loads(self.body)
