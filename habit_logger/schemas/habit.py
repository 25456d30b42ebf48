from typing import Optional

from pydantic import BaseModel, Field


class HabitIn(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    unit: str = Field(min_length=1, max_length=64)


class HabitUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    unit: Optional[str] = Field(default=None, min_length=1, max_length=64)


class HabitOut(BaseModel):
    id: int
    name: str
    unit: str

    class Config:
        from_attributes = True
