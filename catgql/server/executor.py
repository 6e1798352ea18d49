"""
Executes named catalog operations posted to /graphql.

Body shape:
```json
{"operationName": "addCat", "arguments": {"cat": {"name": "Tom", "nicknames": [], "colour": "Black"}}}
```

Every `CatalogError` raised while decoding or dispatching is turned into a
400 response with `{"error": "<message>"}`; the store is only touched once
the request has been fully decoded.
"""
import json
from typing import Any, Callable, Dict, Optional, Union

from pydantic import ValidationError

from catgql.catalog.codec import decode_entry, encode_entries
from catgql.catalog.schema import OperationRequest
from catgql.catalog.store import CatalogStore
from catgql.core.common import describe_validation_error, transform
from catgql.core.errors import CatalogError, MalformedRequest, UnknownOperation
from catgql.core.logger import setup_logger
from .schema import Response

logger = setup_logger(__name__, include_location=True)

Handler = Callable[[OperationRequest], Any]


class QueryExecutor:

    def __init__(self, store: CatalogStore):
        self.store = store
        self._handlers: Dict[str, Handler] = {
            "listCats": self._list_cats,
            "addCat": self._add_cat,
        }

    @property
    def operations(self):
        return tuple(self._handlers)

    def execute(self, body: Optional[Union[bytes, str]]) -> Response:
        try:
            request = self.decode(body)
            result = self.dispatch(request)
        except CatalogError as e:
            logger.warning(f"Rejected request: {e.message}", extra={"error": e.to_error_info().to_dict()})
            return Response.error(e.message, status_code=e.http_status)
        return Response.json_body({"data": {request.operation_name: result}})

    def decode(self, body: Optional[Union[bytes, str]]) -> OperationRequest:
        if body is None:
            raise MalformedRequest("Request body is required")
        if isinstance(body, bytes):
            try:
                body = body.decode("utf-8")
            except UnicodeDecodeError as e:
                raise MalformedRequest("Request body is not valid UTF-8") from e
        if not body.strip():
            raise MalformedRequest("Request body is required")
        try:
            payload = json.loads(body)
        except json.JSONDecodeError as e:
            raise MalformedRequest(f"Request body is not valid JSON: {e.msg}") from e
        except (ValueError, RecursionError) as e:
            # integer digit limit, or nesting deeper than the interpreter stack
            raise MalformedRequest("Request body is not valid JSON") from e
        if not isinstance(payload, dict):
            raise MalformedRequest("Request body must be a JSON object")
        try:
            return transform(OperationRequest, payload)
        except ValidationError as e:
            raise MalformedRequest(f"Invalid request: {describe_validation_error(e)}") from e

    def dispatch(self, request: OperationRequest) -> Any:
        handler = self._handlers.get(request.operation_name)
        if handler is None:
            raise UnknownOperation(request.operation_name)
        logger.debug(f"Dispatching {request.operation_name}")
        return handler(request)

    def _list_cats(self, request: OperationRequest):
        return encode_entries(self.store.list())

    def _add_cat(self, request: OperationRequest):
        if "cat" not in request.arguments:
            raise MalformedRequest("addCat requires arguments.cat")
        entry = decode_entry(request.arguments["cat"])
        self.store.add(entry)
        logger.info(f"addCat: {entry.name}")
        return {}
