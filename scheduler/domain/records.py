from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Dict, List, Optional

from .enums import SelectionPhase


@dataclass(frozen=True)
class ReviewResult:
    word_id: int
    review_stage: int
    next_review_date: date
    last_reviewed_at: datetime


@dataclass(frozen=True)
class ProgressSnapshot:
    word_id: int
    word_text: str
    review_stage: int
    next_review_date: date
    last_reviewed_at: Optional[datetime] = None


@dataclass(frozen=True)
class DueSelection:
    phase: SelectionPhase
    items: List[ProgressSnapshot] = field(default_factory=list)

    @property
    def word_ids(self):
        return [item.word_id for item in self.items]

    @property
    def words(self):
        return [item.word_text for item in self.items]

    @property
    def count(self):
        return len(self.items)


@dataclass(frozen=True)
class ProgressStats:
    total_words: int
    due_words: int
    learned_words: int
    completion_rate: int
    stage_stats: Dict[int, int]


@dataclass(frozen=True)
class InitializationStatus:
    total_words: int
    initialized_words: int
    new_words: int
    is_fully_initialized: bool
    initialization_rate: int
