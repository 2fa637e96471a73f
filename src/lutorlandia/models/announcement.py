"""Announcement model."""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin


class Announcement(Base, TimestampMixin):
    """A news item on the home page.

    Attributes:
        id: Primary key
        title: Headline
        content: Rich HTML body
        date: Display date as entered by the operator
        type: Announcement kind (EVENTO/ACTUALIZACIÓN/TIENDA or free text)
        image: Banner image URL
        time: Optional display time
        link: Optional call-to-action URL
    """

    __tablename__ = "announcements"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    date: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[str] = mapped_column(String(255), nullable=False)
    image: Mapped[str] = mapped_column(String(255), nullable=False)
    time: Mapped[str | None] = mapped_column(String(255), nullable=True)
    link: Mapped[str | None] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"<Announcement(id={self.id}, title='{self.title}')>"
