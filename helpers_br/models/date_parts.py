from __future__ import annotations
from typing import Any

from pydantic import BaseModel, Field, ConfigDict


class DateParts(BaseModel):
    """
    Partes de uma data já decomposta (mês de 1 a 12).
    timestamp em milissegundos desde a época Unix.
    """
    model_config = ConfigDict(frozen=True)

    year: int = Field(..., ge=1, le=9999)
    month: int = Field(..., ge=1, le=12)
    day: int = Field(..., ge=1, le=31)
    hour: int = Field(default=0, ge=0, le=23)
    minute: int = Field(default=0, ge=0, le=59)
    second: int = Field(default=0, ge=0, le=59)
    timestamp: int = Field(..., description="Milissegundos desde 1970-01-01T00:00:00Z")

    def as_dict(self) -> dict[str, Any]:
        return self.model_dump()
