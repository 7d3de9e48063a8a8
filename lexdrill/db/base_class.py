# Fichier: lexdrill/db/base_class.py
from sqlalchemy.orm import DeclarativeBase

class Base(DeclarativeBase):
    """
    Declarative base shared by every SQLAlchemy model.
    ``Base.metadata`` is what ``create_all`` uses to build the schema.
    """
