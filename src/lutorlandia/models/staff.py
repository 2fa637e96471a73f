"""Staff roster model."""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin


class StaffMember(Base, TimestampMixin):
    """A member of the server staff shown on the public roster.

    Attributes:
        id: Primary key
        name: In-game name
        role: Display title (e.g. "Administrador")
        role_label: Role badge (OWNER/ADMIN/SRMOD/MOD/BUILDER)
        description: Short biography
        avatar: URL of the player's head render
    """

    __tablename__ = "staff_members"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(255), nullable=False)
    role_label: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    avatar: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<StaffMember(id={self.id}, name='{self.name}', role_label='{self.role_label}')>"
