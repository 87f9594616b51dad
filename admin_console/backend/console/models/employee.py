from datetime import date

from sqlalchemy import String, Date, Integer, Numeric
from sqlalchemy.orm import Mapped, mapped_column
from console.db.base import Base

class Employee(Base):
    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(100), index=True)
    surname: Mapped[str] = mapped_column(String(100), index=True)
    email: Mapped[str] = mapped_column(String(200), index=True)
    phone: Mapped[str] = mapped_column(String(50), default="")
    department: Mapped[str] = mapped_column(String(100), index=True)
    role: Mapped[str] = mapped_column(String(200), default="")
    salary: Mapped[float] = mapped_column(Numeric(12, 2, asdecimal=False), nullable=False)
    hire_date: Mapped[date] = mapped_column(Date, nullable=False)
    status: Mapped[str] = mapped_column(String(20), default="active", index=True)

    # no foreign key: the company is a soft reference
    company_id: Mapped[int] = mapped_column(Integer, index=True)
