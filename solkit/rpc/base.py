"""JSON-RPC transport and the models shared by every RPC method."""

import dataclasses
import enum
import functools
import types
import typing
from dataclasses import dataclass
from typing import Any, ClassVar

import httpx


class Commitment(str, enum.Enum):
    """How settled the state a request looks at must be."""

    PROCESSED = "processed"
    CONFIRMED = "confirmed"
    FINALIZED = "finalized"


class AccountEncoding(str, enum.Enum):
    """Encoding of account data in responses."""

    BASE58 = "base58"  # limited to account data of less than 128 bytes
    JSON_PARSED = "jsonParsed"
    BASE64 = "base64"
    BASE64_ZSTD = "base64+zstd"


class RpcRequestError(Exception):
    """The request could not be sent or the reply could not be read."""


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def _is_optional(tp: Any) -> bool:
    if tp is Any:
        return True
    if typing.get_origin(tp) in (typing.Union, types.UnionType):
        return type(None) in typing.get_args(tp)
    return False


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, enum.Enum):
        return False
    if isinstance(value, (str, bytes, list, tuple, dict)):
        return not value
    if isinstance(value, (int, float)):
        return value == 0
    return False


def _encode(value: Any) -> Any:
    if isinstance(value, JsonModel):
        return value.to_json()
    if isinstance(value, enum.Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [_encode(item) for item in value]
    if isinstance(value, dict):
        return {key: _encode(item) for key, item in value.items()}
    return value


def _decode(tp: Any, value: Any) -> Any:
    if value is None:
        return None
    origin = typing.get_origin(tp)
    if origin in (typing.Union, types.UnionType):
        args = [arg for arg in typing.get_args(tp) if arg is not type(None)]
        return _decode(args[0], value) if len(args) == 1 else value
    if origin is list:
        (item_type,) = typing.get_args(tp)
        return [_decode(item_type, item) for item in value]
    if not isinstance(tp, type):
        return value
    if issubclass(tp, JsonModel):
        return tp.from_json(value)
    if issubclass(tp, enum.Enum):
        try:
            return tp(value)
        except ValueError:
            return value
    if tp is float:
        return float(value)
    return value


@functools.lru_cache(maxsize=None)
def _schema(cls: type) -> tuple[tuple[str, str, Any, bool], ...]:
    schema = []
    for f in dataclasses.fields(cls):
        if isinstance(f.type, str):
            raise TypeError(
                f"{cls.__name__}.{f.name}: field annotations must be real types, "
                "not postponed strings"
            )
        schema.append(
            (
                f.name,
                f.metadata.get("json", _camel(f.name)),
                f.type,
                f.metadata.get("omitempty", cls._omit_empty),
            )
        )
    return tuple(schema)


class JsonModel:
    """Base of dataclasses that map to and from JSON objects.

    Field names are written in camelCase unless a field's metadata gives a
    "json" name. Subclasses declared with ``omit_empty=True`` leave out empty
    values when encoding; a field's "omitempty" metadata overrides that.
    Field annotations must be evaluated types, not postponed strings.
    """

    _omit_empty: ClassVar[bool] = False

    def __init_subclass__(cls, omit_empty: bool | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if omit_empty is not None:
            cls._omit_empty = omit_empty

    @classmethod
    def from_json(cls, data: dict[str, Any]):
        """Build an instance from a decoded JSON object; unknown keys are ignored."""
        kwargs = {}
        for attr, key, tp, _ in _schema(cls):
            if key not in data:
                continue
            value = data[key]
            if value is None and not _is_optional(tp):
                continue
            kwargs[attr] = _decode(tp, value)
        return cls(**kwargs)

    def to_json(self) -> dict[str, Any]:
        """Encode the instance as a JSON-ready dict."""
        out = {}
        for attr, key, _, omit in _schema(type(self)):
            value = getattr(self, attr)
            if omit and _is_empty(value):
                continue
            out[key] = _encode(value)
        return out


@dataclass
class Context(JsonModel):
    slot: int = 0


@dataclass
class ErrorResponse(JsonModel):
    code: int = 0
    message: str = ""
    data: Any = None


@dataclass
class RpcResponse(JsonModel):
    """A full JSON-RPC reply; error holds the node's error, if any."""

    jsonrpc: str = ""
    id: int = 0
    result: Any = None
    error: ErrorResponse | None = None


@dataclass
class AccountInfo(JsonModel):
    lamports: int = 0
    owner: str = ""
    rent_epoch: int = 0
    data: Any = None
    executable: bool = False


@dataclass
class CommitmentConfig(JsonModel, omit_empty=True):
    """Option config for methods that take only a commitment."""

    commitment: Commitment | None = None


class RpcTransport:
    """Sends JSON-RPC requests to a node over HTTP."""

    def __init__(self, endpoint: str, http_client: httpx.Client | None = None) -> None:
        self.endpoint = endpoint
        self._owns_client = http_client is None
        self.http_client = http_client if http_client is not None else httpx.Client()

    def call(self, method: str, *args: Any) -> dict[str, Any]:
        """Send one request and return the decoded JSON reply."""
        payload: dict[str, Any] = {"jsonrpc": "2.0", "id": 1, "method": method}
        if args:
            payload["params"] = [_encode(arg) for arg in args]
        try:
            reply = self.http_client.post(self.endpoint, json=payload)
            reply.raise_for_status()
            body = reply.json()
        except httpx.HTTPError as exc:
            raise RpcRequestError(f"request failed: {exc}") from exc
        except ValueError as exc:
            raise RpcRequestError(f"invalid json response: {exc}") from exc
        if not isinstance(body, dict):
            raise RpcRequestError("response is not a json object")
        return body

    def _request(self, method: str, result_type: Any, *params: Any) -> RpcResponse:
        body = self.call(method, *params)
        response = RpcResponse.from_json(body)
        response.result = _decode(result_type, body.get("result"))
        return response

    def close(self) -> None:
        """Close the HTTP client if this transport created it."""
        if self._owns_client:
            self.http_client.close()

    def __enter__(self) -> "RpcTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()