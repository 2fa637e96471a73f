"""Rule category and rule models.

Both tables carry an ``order`` column assigned at creation time; see
``lutorlandia.domain.ordering``.
"""

from sqlalchemy import ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin


class RuleCategory(Base, TimestampMixin):
    """A titled group of server rules.

    Attributes:
        id: Primary key
        name: Category heading (e.g. "Generales", "Chat")
        description: Intro text shown under the heading
        order: Display position among all categories
    """

    __tablename__ = "rule_categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    order: Mapped[int] = mapped_column(Integer, nullable=False)

    rules: Mapped[list["Rule"]] = relationship(
        "Rule", back_populates="category", passive_deletes=True
    )

    def __repr__(self) -> str:
        return f"<RuleCategory(id={self.id}, name='{self.name}', order={self.order})>"


class Rule(Base, TimestampMixin):
    """A single rule inside a category.

    Attributes:
        id: Primary key
        category_id: Foreign key to the owning category
        title: Rule title
        description: Rule text
        order: Display position within the category
    """

    __tablename__ = "rules"
    __table_args__ = (Index("idx_rules_category_order", "category_id", "order"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    category_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("rule_categories.id"), nullable=False
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    order: Mapped[int] = mapped_column(Integer, nullable=False)

    category: Mapped["RuleCategory"] = relationship("RuleCategory", back_populates="rules")

    def __repr__(self) -> str:
        return f"<Rule(id={self.id}, category_id={self.category_id}, order={self.order})>"
