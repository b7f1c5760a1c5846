"""Response envelopes shared by all endpoints."""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

from blog.domain.value import PageMeta

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """Success envelope: {"success": true, "data": ..., "meta": ...}."""

    success: bool = True
    data: Optional[T] = None
    meta: Optional[PageMeta] = None


class ErrorEnvelope(BaseModel):
    """Error envelope: {"success": false, "error": "...", "data": null}."""

    success: bool = False
    error: str
    data: None = None
