from typing import Dict, List, Optional
from ..domain.model import Question, Quiz

class QuizRepository:
    """In-memory store for quizzes and questions.

    Both collections are dicts keyed by id, so iteration follows insertion
    order. Nothing is ever removed: state lives until the process exits.
    """

    def __init__(self) -> None:
        self._quizzes: Dict[str, Quiz] = {}
        self._questions: Dict[str, Question] = {}

    def list_quizzes(self) -> List[Quiz]:
        return list(self._quizzes.values())

    def get_quiz(self, quiz_id: str) -> Optional[Quiz]:
        return self._quizzes.get(quiz_id)

    def add_quiz(self, quiz: Quiz) -> None:
        if quiz.id in self._quizzes:
            raise RuntimeError(f"Duplicate quiz id: {quiz.id}")
        self._quizzes[quiz.id] = quiz

    def add_question(self, question: Question) -> None:
        quiz = self._quizzes.get(question.quiz_id)
        if quiz is None:
            raise RuntimeError(f"Question references unknown quiz: {question.quiz_id}")
        if question.id in self._questions:
            raise RuntimeError(f"Duplicate question id: {question.id}")
        self._questions[question.id] = question
        quiz.question_ids.append(question.id)

    def questions_for_quiz(self, quiz_id: str) -> List[Question]:
        # filter order of the global collection, not quiz.question_ids order
        return [q for q in self._questions.values() if q.quiz_id == quiz_id]
