import datetime

from sqlalchemy import Date, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from habit_logger.models.base import Base


class Record(Base):
    __tablename__ = "records"

    id: Mapped[int] = mapped_column("Id", Integer, primary_key=True, autoincrement=True)
    date: Mapped[datetime.date] = mapped_column("Date", Date, index=True)
    quantity: Mapped[int] = mapped_column("Quantity", Integer)
    habit_id: Mapped[int] = mapped_column("HabitId", ForeignKey("habits.Id", ondelete="CASCADE"), index=True)

    habit: Mapped["Habit"] = relationship(back_populates="records")
