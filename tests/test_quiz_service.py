import threading

import pytest

from app.domain.errors import InvalidReferenceError, NotFoundError, ValidationError
from app.domain.model import Option
from app.services.quiz_service import QuizService

OPTIONS = [Option(id="a", text="3"), Option(id="b", text="4")]


@pytest.fixture
def svc():
    return QuizService()


@pytest.fixture
def math_quiz(svc):
    quiz = svc.create_quiz("Math Quiz")
    question = svc.add_question(quiz.id, "What is 2+2?", OPTIONS, "b")
    return quiz, question


def test_create_quiz_generates_unique_ids(svc):
    ids = {svc.create_quiz(f"Quiz {i}").id for i in range(50)}
    assert len(ids) == 50


def test_list_quizzes_projects_id_and_title_in_insertion_order(svc):
    first = svc.create_quiz("First")
    second = svc.create_quiz("Second")
    assert svc.list_quizzes() == [
        {"id": first.id, "title": "First"},
        {"id": second.id, "title": "Second"},
    ]


def test_new_quiz_has_no_questions(svc):
    quiz = svc.create_quiz("Empty")
    assert quiz.question_ids == []
    assert svc.get_questions(quiz.id) == []


def test_add_question_appends_to_quiz(svc, math_quiz):
    quiz, question = math_quiz
    assert quiz.question_ids == [question.id]
    assert question.quiz_id == quiz.id
    assert question.correct_option_id == "b"


def test_get_questions_hides_correct_option(svc, math_quiz):
    quiz, question = math_quiz
    assert svc.get_questions(quiz.id) == [
        {
            "id": question.id,
            "text": "What is 2+2?",
            "options": [{"id": "a", "text": "3"}, {"id": "b", "text": "4"}],
        }
    ]


def test_get_questions_only_returns_own_quiz(svc, math_quiz):
    quiz, question = math_quiz
    other = svc.create_quiz("Other")
    svc.add_question(other.id, "Capital of France?", [Option("p", "Paris"), Option("l", "Lyon")], "p")
    assert [q["id"] for q in svc.get_questions(quiz.id)] == [question.id]


def test_add_question_rejects_unknown_correct_option(svc):
    quiz = svc.create_quiz("Math Quiz")
    with pytest.raises(InvalidReferenceError, match="Invalid correct option ID"):
        svc.add_question(quiz.id, "What is 2+2?", OPTIONS, "z")
    assert quiz.question_ids == []
    assert svc.get_questions(quiz.id) == []


def test_add_question_checks_quiz_before_option(svc):
    with pytest.raises(NotFoundError, match="Quiz not found"):
        svc.add_question("missing", "What is 2+2?", OPTIONS, "z")


@pytest.mark.parametrize("call", [
    lambda s: s.get_questions("missing"),
    lambda s: s.submit_answers("missing", []),
])
def test_unknown_quiz_is_not_found(svc, call):
    with pytest.raises(NotFoundError, match="Quiz not found"):
        call(svc)


def test_submit_correct_answer(svc, math_quiz):
    quiz, question = math_quiz
    result = svc.submit_answers(quiz.id, [{"questionId": question.id, "selectedOptionId": "b"}])
    assert result == {"score": 1, "total": 1}


def test_submit_wrong_answer(svc, math_quiz):
    quiz, question = math_quiz
    result = svc.submit_answers(quiz.id, [{"questionId": question.id, "selectedOptionId": "a"}])
    assert result == {"score": 0, "total": 1}


def test_submit_with_missing_answers_fails(svc, math_quiz):
    quiz, _ = math_quiz
    with pytest.raises(ValidationError, match="Answers must cover all questions"):
        svc.submit_answers(quiz.id, [])


def test_submit_with_too_many_answers_fails(svc, math_quiz):
    quiz, question = math_quiz
    answer = {"questionId": question.id, "selectedOptionId": "b"}
    with pytest.raises(ValidationError):
        svc.submit_answers(quiz.id, [answer, answer])


def test_empty_quiz_scores_zero_of_zero(svc):
    quiz = svc.create_quiz("Empty")
    assert svc.submit_answers(quiz.id, []) == {"score": 0, "total": 0}


def test_foreign_question_scores_zero_without_error(svc, math_quiz):
    quiz, question = math_quiz
    other = svc.create_quiz("Other")
    foreign = svc.add_question(other.id, "Capital of France?", [Option("p", "Paris"), Option("l", "Lyon")], "p")
    second = svc.add_question(quiz.id, "What is 3+3?", [Option("x", "6"), Option("y", "7")], "x")

    result = svc.submit_answers(quiz.id, [
        {"questionId": foreign.id, "selectedOptionId": "p"},
        {"questionId": second.id, "selectedOptionId": "x"},
    ])
    assert result == {"score": 1, "total": 2}


def test_answers_missing_fields_score_zero(svc, math_quiz):
    quiz, _ = math_quiz
    assert svc.submit_answers(quiz.id, [{}]) == {"score": 0, "total": 1}


def test_scoring_is_order_independent(svc):
    quiz = svc.create_quiz("Mixed")
    q1 = svc.add_question(quiz.id, "One", OPTIONS, "a")
    q2 = svc.add_question(quiz.id, "Two", OPTIONS, "b")
    q3 = svc.add_question(quiz.id, "Three", OPTIONS, "a")
    answers = [
        {"questionId": q1.id, "selectedOptionId": "a"},
        {"questionId": q2.id, "selectedOptionId": "a"},
        {"questionId": q3.id, "selectedOptionId": "a"},
    ]
    expected = {"score": 2, "total": 3}
    assert svc.submit_answers(quiz.id, answers) == expected
    assert svc.submit_answers(quiz.id, list(reversed(answers))) == expected
    assert svc.submit_answers(quiz.id, answers[1:] + answers[:1]) == expected


def test_services_do_not_share_state():
    one, two = QuizService(), QuizService()
    quiz = one.create_quiz("Only here")
    assert two.list_quizzes() == []
    with pytest.raises(NotFoundError):
        two.get_questions(quiz.id)


def test_concurrent_adds_keep_collections_consistent(svc):
    quiz = svc.create_quiz("Busy")

    def add_many():
        for i in range(50):
            svc.add_question(quiz.id, f"Q{i}", OPTIONS, "a")

    threads = [threading.Thread(target=add_many) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    questions = svc.get_questions(quiz.id)
    assert len(questions) == 200
    assert [q["id"] for q in questions] == quiz.question_ids


@pytest.mark.parametrize("answer", ["b", None, 7, {"questionId": 5}, {"questionId": ["x"]}])
def test_malformed_answers_score_zero(svc, math_quiz, answer):
    quiz, _ = math_quiz
    assert svc.submit_answers(quiz.id, [answer]) == {"score": 0, "total": 1}


def test_malformed_answer_still_counts_toward_cardinality(svc, math_quiz):
    quiz, question = math_quiz
    with pytest.raises(ValidationError):
        svc.submit_answers(quiz.id, ["b", {"questionId": question.id, "selectedOptionId": "b"}])
