from enum import Enum, IntEnum

class Outcome(IntEnum):
    INCORRECT = 0
    CORRECT = 1

    @classmethod
    def from_flag(cls, is_correct):
        return cls.CORRECT if is_correct else cls.INCORRECT

OUTCOME_LABELS = {
    Outcome.INCORRECT: "forgot",
    Outcome.CORRECT: "remembered",
}

class SelectionPhase(str, Enum):
    NEW = "new"
    REVIEW = "review"
