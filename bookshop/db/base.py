# bookshop/db/base.py
# Alembic model registry: imports Base + every model so Alembic detects all tables.
# Do NOT import this file from model files (use bookshop.db.base_class instead).
# This file is imported by:
#   - alembic/env.py          (schema detection)
#   - bookshop/db/init_db.py  (seeding)
#   - bookshop/main.py        (mapper configuration before the first request)

from bookshop.db.base_class import Base  # noqa: F401

# ── Import all models here so Alembic can detect them ────────────────────────
# Order matters: parent tables before child tables (foreign key dependencies)

from bookshop.models.user import User                                  # noqa: F401, E402
from bookshop.models.category import Category, book_categories         # noqa: F401, E402
from bookshop.models.book import Book                                  # noqa: F401, E402
from bookshop.models.review import Review                              # noqa: F401, E402
from bookshop.models.bookmark import Bookmark                          # noqa: F401, E402
