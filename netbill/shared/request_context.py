from __future__ import annotations

from contextvars import ContextVar
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RequestContext:
    request_id: Optional[str]
    path: Optional[str]


_request_ctx: ContextVar[RequestContext] = ContextVar(
    "request_context",
    default=RequestContext(request_id=None, path=None),
)


def set_request_context(*, request_id: str | None, path: str | None) -> None:
    _request_ctx.set(RequestContext(request_id=request_id, path=path))


def get_request_context() -> RequestContext:
    return _request_ctx.get()
