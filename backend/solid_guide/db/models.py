from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .session import Base


class EmployeeRow(Base):
    """Table backing the SQLAlchemy employee store."""

    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    role: Mapped[str] = mapped_column(String(100), nullable=False)
