"""Model uzytkownika panelu administracyjnego."""

from datetime import datetime
from enum import Enum
from typing import Optional

from sqlalchemy import String, Boolean, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from ..database import Base


class UserRole(str, Enum):
    """Role uzytkownikow w systemie."""
    ADMIN = "admin"  # Pelny dostep do panelu
    USER = "user"    # Konto bez dostepu do panelu admina


class User(Base):
    """Model uzytkownika systemu rezerwacji."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True)

    # Dane logowania
    username: Mapped[str] = mapped_column(String(50), unique=True, index=True)
    hashed_password: Mapped[str] = mapped_column(String(255))

    # Dane wyswietlane w panelu
    name: Mapped[str] = mapped_column(String(100), default="")

    # Rola i status
    role: Mapped[str] = mapped_column(String(20), default=UserRole.USER.value)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)

    # Metadata
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow
    )
    last_login: Mapped[Optional[datetime]] = mapped_column(
        DateTime, nullable=True
    )

    @property
    def is_admin(self) -> bool:
        """Czy uzytkownik ma role admin."""
        return self.role == UserRole.ADMIN.value

    def __repr__(self) -> str:
        return f"<User {self.username} ({self.role})>"
