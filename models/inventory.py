from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from database import Base

class Category(Base):
    __tablename__ = 'categories'

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(100), nullable=False)

    components = relationship("Component", back_populates="category", passive_deletes=True)

class Location(Base):
    __tablename__ = 'locations'

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(100), nullable=False)

    components = relationship("Component", back_populates="location", passive_deletes=True)

class Component(Base):
    __tablename__ = 'components'
    __table_args__ = (
        CheckConstraint('quantity >= 0', name='ck_components_quantity_non_negative'),
    )

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(255), nullable=False, index=True)
    description = Column(String, nullable=True)
    quantity = Column(Integer, nullable=False, default=0)
    status = Column(String(50), nullable=True, default="available")
    image_url = Column(String, nullable=True)
    category_id = Column(Integer, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True)
    location_id = Column(Integer, ForeignKey("locations.id", ondelete="SET NULL"), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    category = relationship("Category", back_populates="components")
    location = relationship("Location", back_populates="components")
    movements = relationship("Movement", back_populates="component", cascade="all, delete-orphan", passive_deletes=True)

    @property
    def category_name(self):
        return self.category.name if self.category else None

    @property
    def location_name(self):
        return self.location.name if self.location else None
