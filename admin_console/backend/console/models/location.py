from sqlalchemy import String, Float, Boolean
from sqlalchemy.orm import Mapped, mapped_column

from console.db.base import Base


class Location(Base):
    __tablename__ = "locations"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(200), index=True)
    latitude: Mapped[float] = mapped_column(Float, nullable=False)
    longitude: Mapped[float] = mapped_column(Float, nullable=False)
    country: Mapped[str] = mapped_column(String(100), index=True)
    city: Mapped[str] = mapped_column(String(100))
    kind: Mapped[str] = mapped_column(String(30), default="office", index=True)
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
