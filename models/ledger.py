from sqlalchemy import Column, Integer, String, DateTime, Enum, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from enum import Enum as PyEnum
from database import Base

class MovementKind(str, PyEnum):
    ENTRY = "entry"
    EXIT = "exit"
    LOAN = "loan"
    RETURN = "return"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            lowered = value.strip().lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return None

    @property
    def sign(self) -> int:
        return -1 if self in (MovementKind.LOAN, MovementKind.EXIT) else 1


class Movement(Base):
    __tablename__ = "movements"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    component_id = Column(Integer, ForeignKey("components.id", ondelete="CASCADE"), nullable=False, index=True)
    kind = Column(Enum(MovementKind), nullable=False)
    quantity = Column(Integer, nullable=False)
    person = Column(String(255), nullable=True, index=True)
    notes = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)

    component = relationship("Component", back_populates="movements")

    @property
    def component_name(self):
        return self.component.name if self.component else None
