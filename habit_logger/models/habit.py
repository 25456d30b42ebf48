from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from habit_logger.models.base import Base


class Habit(Base):
    __tablename__ = "habits"

    id: Mapped[int] = mapped_column("Id", Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column("Name", String(255))
    unit: Mapped[str] = mapped_column("MeasurementUnit", String(64))

    records: Mapped[list["Record"]] = relationship(
        back_populates="habit",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
