from typing import Literal

from pydantic import BaseModel, Field


class ElectiveCreate(BaseModel):
    id: str | None = None
    name: str = Field(..., min_length=1)
    hours: int = Field(..., gt=0)
    kind: Literal["discipline", "complementary"] = "discipline"
