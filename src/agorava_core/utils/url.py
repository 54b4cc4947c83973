"""
agorava_core.utils.url

Query-string encoding helpers.

Responsibilities:
- RFC 3986 percent-encoding of keys and values.
- Append ordered parameters (mapping or structured object) to a URL.
- Decode a query string back into an ordered mapping.

Ordering rules:
- Mappings are emitted in iteration order.
- Structured objects are emitted in declared field order.
- `None` values are skipped in both cases, so an object and its equivalent mapping
  produce the same string.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable
from urllib.parse import quote, unquote_plus

from pydantic import BaseModel


@runtime_checkable
class QueryParamsProvider(Protocol):
    """
    Parameter objects that know their own ordered field -> value pairs.
    """

    def to_query_params(self) -> Mapping[str, Any]: ...


def percent_encode(value: str) -> str:
    # Only RFC 3986 unreserved characters (ALPHA / DIGIT / "-" / "." / "_" / "~") pass through.
    return quote(value, safe="")


def percent_decode(value: str) -> str:
    return unquote_plus(value)


def form_url_encode_map(params: Mapping[str, Any]) -> str:
    return "&".join(
        f"{percent_encode(str(key))}={percent_encode(_render(value))}"
        for key, value in params.items()
        if value is not None
    )


def append_parameters_to_query_string(url: str, params: Mapping[str, Any]) -> str:
    query = form_url_encode_map(params)
    if not query:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{query}"


def build_uri(url: str, params: Mapping[str, Any] | object, value: Any = None) -> str:
    """
    Append query parameters to `url`.

    `params` may be a single key (with `value`), a mapping, or a structured object
    (see `object_to_params`). A single key is always appended; a `None` value renders
    as `key=`.
    """

    if isinstance(params, str):
        return append_parameters_to_query_string(url, {params: "" if value is None else value})
    return append_parameters_to_query_string(url, object_to_params(params))


def object_to_params(obj: Any) -> dict[str, Any]:
    """
    Flatten `obj` into an ordered dict of its non-None fields.

    Supported, in priority order: mappings, `QueryParamsProvider`, pydantic models
    (by alias), dataclasses, named tuples, and plain objects (public slots, then
    public instance attributes).
    """

    if isinstance(obj, Mapping):
        items = dict(obj)
    elif isinstance(obj, QueryParamsProvider):
        items = dict(obj.to_query_params())
    elif isinstance(obj, BaseModel):
        items = obj.model_dump(mode="json", by_alias=True)
    elif dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        items = {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    elif isinstance(obj, tuple) and hasattr(obj, "_asdict"):
        items = obj._asdict()
    else:
        items = _public_attributes(obj)
    return {k: v for k, v in items.items() if v is not None}


def _public_attributes(obj: Any) -> dict[str, Any]:
    items: dict[str, Any] = {}
    # Base classes first so inherited slots keep their declared position.
    for cls in reversed(type(obj).__mro__):
        slots = cls.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if not name.startswith("_") and hasattr(obj, name):
                items[name] = getattr(obj, name)
    if hasattr(obj, "__dict__"):
        items.update((k, v) for k, v in vars(obj).items() if not k.startswith("_"))
    return items


def query_string_to_map(query: str) -> dict[str, str]:
    params: dict[str, str] = {}
    for pair in query.lstrip("?").split("&"):
        if not pair:
            continue
        key, _, value = pair.partition("=")
        params[percent_decode(key)] = percent_decode(value)
    return params


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


# --- Module Notes -----------------------------------------------------------
# `percent_decode` also accepts form encoding ("+" for space) so provider responses decode cleanly.
