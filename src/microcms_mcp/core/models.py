from __future__ import annotations

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict


class ContentQuery(BaseModel):
    """
    Query parameters accepted by the microCMS content API.

    Field order is the order keys appear in the query string. ``None`` means
    "not supplied"; falsy values such as ``0`` or ``""`` are still sent.
    """

    limit: Optional[int] = None
    offset: Optional[int] = None
    orders: Optional[str] = None
    q: Optional[str] = None
    filters: Optional[str] = None
    fields: Optional[str] = None
    depth: Optional[int] = None
    draftKey: Optional[str] = None

    model_config = ConfigDict(extra="forbid")

    def to_params(self) -> Dict[str, str]:
        return {k: str(v) for k, v in self.model_dump(exclude_none=True).items()}


__all__ = ["ContentQuery"]
