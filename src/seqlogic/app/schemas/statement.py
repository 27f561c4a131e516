from pydantic import BaseModel, ConfigDict, Field
import typing as tp


__all__ = ["Statement"]


class Statement(BaseModel):
    model_config = ConfigDict(frozen=True)

    description: str = Field(..., description="Human readable question answered")
    value: tp.Union[bool, int] = Field(..., description="Computed result")

    def __str__(self) -> str:
        # booleans render as true/false
        value = str(self.value).lower() if isinstance(self.value, bool) else self.value
        return f"{self.description} = {value}"
