import datetime
from typing import Optional

from pydantic import BaseModel, Field


class RecordIn(BaseModel):
    habit_id: int
    date: datetime.date
    quantity: int = Field(ge=0)


class RecordUpdate(BaseModel):
    date: Optional[datetime.date] = None
    quantity: Optional[int] = Field(default=None, ge=0)


class RecordOut(BaseModel):
    id: int
    date: datetime.date
    quantity: int
    habit_name: str
    unit: str

    class Config:
        from_attributes = True
