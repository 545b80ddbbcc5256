import logging
import threading
import uuid
from typing import Any, Iterable, List, Mapping, Optional

from .typing import option_to_dict
from ..domain.errors import InvalidReferenceError, NotFoundError, ValidationError
from ..domain.model import Option, Question, Quiz
from ..repositories.quiz_repository import QuizRepository

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return str(uuid.uuid4())


class QuizService:
    """Creates quizzes and questions, hides answers and scores submissions.

    Every public method holds one lock for its whole duration, so calls from
    several threads are serialized against both collections.
    """

    def __init__(self, repo: Optional[QuizRepository] = None) -> None:
        self.repo = repo if repo is not None else QuizRepository()
        self._lock = threading.RLock()

    def create_quiz(self, title: str) -> Quiz:
        with self._lock:
            quiz = Quiz(id=_new_id(), title=title)
            self.repo.add_quiz(quiz)
        logger.info("Created quiz %s (%r)", quiz.id, title)
        return quiz

    def list_quizzes(self) -> list[dict]:
        with self._lock:
            items = self.repo.list_quizzes()
            return [{"id": q.id, "title": q.title} for q in items]

    def add_question(
        self,
        quiz_id: str,
        text: str,
        options: List[Option],
        correct_option_id: str,
    ) -> Question:
        with self._lock:
            if self.repo.get_quiz(quiz_id) is None:
                raise NotFoundError("Quiz not found")
            if not any(opt.id == correct_option_id for opt in options):
                raise InvalidReferenceError("Invalid correct option ID")

            question = Question(
                id=_new_id(),
                quiz_id=quiz_id,
                text=text,
                options=list(options),
                correct_option_id=correct_option_id,
            )
            self.repo.add_question(question)
        logger.info("Added question %s to quiz %s", question.id, quiz_id)
        return question

    def get_questions(self, quiz_id: str) -> list[dict]:
        with self._lock:
            if self.repo.get_quiz(quiz_id) is None:
                raise NotFoundError("Quiz not found")
            return [
                {
                    "id": q.id,
                    "text": q.text,
                    "options": [option_to_dict(o) for o in q.options],
                }
                for q in self.repo.questions_for_quiz(quiz_id)
            ]

    def submit_answers(self, quiz_id: str, answers: Iterable[Any]) -> dict:
        """Score ``answers`` against the quiz's questions.

        Each answer should be a mapping with ``questionId`` and
        ``selectedOptionId``. The number of answers must equal the number
        of questions. Answers for questions outside the quiz, and entries
        that are not mappings or carry non-string ids, count as wrong.
        """
        answers = list(answers)
        with self._lock:
            if self.repo.get_quiz(quiz_id) is None:
                raise NotFoundError("Quiz not found")

            by_id = {q.id: q for q in self.repo.questions_for_quiz(quiz_id)}
            total = len(by_id)
            if len(answers) != total:
                raise ValidationError("Answers must cover all questions")

            score = 0
            for answer in answers:
                if not isinstance(answer, Mapping):
                    continue
                question_id = answer.get("questionId")
                question = by_id.get(question_id) if isinstance(question_id, str) else None
                if question is not None and question.correct_option_id == answer.get("selectedOptionId"):
                    score += 1

        logger.debug("Scored quiz %s: %d/%d", quiz_id, score, total)
        return {"score": score, "total": total}
