# bookshop/models/category.py
# Categories have their own lifecycle; books reference them, never own them.

from sqlalchemy import Column, ForeignKey, Integer, String, Table, Uuid
from sqlalchemy.orm import relationship

from bookshop.db.base_class import Base


book_categories = Table(
    "book_categories",
    Base.metadata,
    Column("book_id", Uuid(as_uuid=True), ForeignKey("books.id", ondelete="CASCADE"), primary_key=True),
    Column("category_id", Integer, ForeignKey("categories.id", ondelete="CASCADE"), primary_key=True),
)


class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)

    books = relationship("Book", secondary=book_categories, back_populates="categories")

    def __repr__(self) -> str:
        return f"<Category id={self.id} name={self.name}>"
