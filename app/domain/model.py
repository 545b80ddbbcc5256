from dataclasses import dataclass, field
from typing import List

@dataclass(frozen=True)
class Option:
    id: str
    text: str

@dataclass(frozen=True)
class Question:
    id: str
    quiz_id: str
    text: str
    options: List[Option]
    correct_option_id: str

@dataclass
class Quiz:
    id: str
    title: str
    # append-only
    question_ids: List[str] = field(default_factory=list)
