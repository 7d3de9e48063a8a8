"""Schemas shared by the services, repositories and routers."""

from .vocabulary_schema import ActivityPerformance, PerformanceData, SrsData, VocabItem
from .drill_schema import (
    ActivityOutcome,
    ActivityType,
    DrillSelection,
    DrillSession,
    ReviewMode,
    ReviewSelection,
    Sm2ReviewResult,
    SrsUpdateResult,
)
from .progress_schema import ActivitySummary, OverallSummary, PerformanceSummary, ProgressStats

__all__ = (
    "ActivityPerformance",
    "PerformanceData",
    "SrsData",
    "VocabItem",
    "ActivityOutcome",
    "ActivityType",
    "DrillSelection",
    "DrillSession",
    "ReviewMode",
    "ReviewSelection",
    "Sm2ReviewResult",
    "SrsUpdateResult",
    "ActivitySummary",
    "OverallSummary",
    "PerformanceSummary",
    "ProgressStats",
)
