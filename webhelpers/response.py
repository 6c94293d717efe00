"""Uniform response envelope returned by API endpoints.

``ResponseWrapper`` gives every endpoint the same JSON shape: outcome flag,
messages, payload, numeric status code and request metadata. Instances are
immutable; build them with the named factories (``success``, ``error``,
``bad_request``, ...) or with ``ResponseWrapper.builder()`` when a response
needs fields the factories do not set.
"""

from datetime import datetime, timezone
from http import HTTPStatus
from typing import Any, Dict, Generic, Optional, Type, TypeVar, Union

from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .core.errors import IllegalStateError


T = TypeVar("T")

Status = Union[HTTPStatus, int]

SUCCESS_MESSAGE = "Operation successful"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _status_code(status: Status) -> int:
    return int(status)


class ResponseWrapper(BaseModel, Generic[T]):
    """Generic response envelope wrapping a payload of type ``T``.

    Serialized with camelCase keys (``technicalMessage``, ``requestId``) and
    an ISO-8601 ``timestamp``.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    successful: bool = False
    message: Optional[str] = None
    technical_message: Optional[str] = None
    data: Optional[T] = None
    code: int = 0
    request_id: Optional[str] = None
    timestamp: datetime = Field(default_factory=_utcnow)
    path: Optional[str] = None

    def get_data_or_throw(self) -> T:
        """Return the payload.

        Raises:
            IllegalStateError: If the envelope carries no payload. Check
                ``has_data()`` first when absence is expected.
        """
        if self.data is None:
            raise IllegalStateError("No data present in response")
        return self.data

    def get_data_or_default(self, default_value: T) -> T:
        return self.data if self.data is not None else default_value

    def has_data(self) -> bool:
        return self.data is not None

    def with_request_context(
        self, request_id: Optional[str] = None, path: Optional[str] = None
    ) -> "ResponseWrapper[T]":
        """Return a copy stamped with the request's correlation id and path."""
        update: Dict[str, Any] = {}
        if request_id is not None:
            update["request_id"] = request_id
        if path is not None:
            update["path"] = path
        return self.model_copy(update=update) if update else self

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)

    def to_json_response(self, status_code: Optional[int] = None) -> JSONResponse:
        """Render the envelope as a FastAPI ``JSONResponse``.

        The HTTP status defaults to ``code`` when it is a real HTTP status,
        otherwise 200.
        """
        if status_code is None:
            status_code = self.code if 100 <= self.code <= 599 else HTTPStatus.OK.value
        return JSONResponse(status_code=status_code, content=self.to_dict())

    @classmethod
    def builder(cls) -> "ResponseWrapperBuilder[T]":
        return ResponseWrapperBuilder(cls)

    @classmethod
    def success(cls, data: T, message: str = SUCCESS_MESSAGE) -> "ResponseWrapper[T]":
        return (
            cls.builder()
            .successful(True)
            .message(message)
            .code(HTTPStatus.OK)
            .data(data)
            .build()
        )

    @classmethod
    def error(
        cls, message: str, status: Status, technical_message: Optional[str] = None
    ) -> "ResponseWrapper[T]":
        return (
            cls.builder()
            .successful(False)
            .message(message)
            .technical_message(technical_message)
            .code(status)
            .build()
        )

    @classmethod
    def bad_request(cls, message: str) -> "ResponseWrapper[T]":
        return cls.error(message, HTTPStatus.BAD_REQUEST)

    @classmethod
    def not_found(cls, message: str) -> "ResponseWrapper[T]":
        return cls.error(message, HTTPStatus.NOT_FOUND)

    @classmethod
    def server_error(cls, message: str) -> "ResponseWrapper[T]":
        return cls.error(message, HTTPStatus.INTERNAL_SERVER_ERROR)


class ResponseWrapperBuilder(Generic[T]):
    """Mutable accumulator for ``ResponseWrapper`` fields.

    Every setter returns the builder so calls can be chained; ``build()``
    snapshots the current values into a new immutable envelope.
    """

    def __init__(self, model: Type[ResponseWrapper] = ResponseWrapper):
        self._model = model
        self._successful = False
        self._message: Optional[str] = None
        self._technical_message: Optional[str] = None
        self._data: Optional[T] = None
        self._code = 0
        self._request_id: Optional[str] = None
        self._path: Optional[str] = None
        self._timestamp = _utcnow()

    def successful(self, successful: bool) -> "ResponseWrapperBuilder[T]":
        self._successful = successful
        return self

    def message(self, message: Optional[str]) -> "ResponseWrapperBuilder[T]":
        self._message = message
        return self

    def technical_message(self, technical_message: Optional[str]) -> "ResponseWrapperBuilder[T]":
        self._technical_message = technical_message
        return self

    def data(self, data: Optional[T]) -> "ResponseWrapperBuilder[T]":
        self._data = data
        return self

    def code(self, code: Status) -> "ResponseWrapperBuilder[T]":
        self._code = _status_code(code)
        return self

    def request_id(self, request_id: Optional[str]) -> "ResponseWrapperBuilder[T]":
        self._request_id = request_id
        return self

    def path(self, path: Optional[str]) -> "ResponseWrapperBuilder[T]":
        self._path = path
        return self

    def timestamp(self, timestamp: datetime) -> "ResponseWrapperBuilder[T]":
        self._timestamp = timestamp
        return self

    def build(self) -> ResponseWrapper[T]:
        return self._model(
            successful=self._successful,
            message=self._message,
            technical_message=self._technical_message,
            data=self._data,
            code=self._code,
            request_id=self._request_id,
            timestamp=self._timestamp,
            path=self._path,
        )
