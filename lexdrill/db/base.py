"""Registers every SQLAlchemy model on ``Base.metadata``."""

from lexdrill.db.base_class import Base

# Vocabulary bank
from lexdrill.models.vocabulary_item_model import VocabularyItem
from lexdrill.models.srs_record_model import SrsRecord

# Drill history
from lexdrill.models.drill_session_model import DrillSessionRecord

__all__ = ["Base", "VocabularyItem", "SrsRecord", "DrillSessionRecord"]
