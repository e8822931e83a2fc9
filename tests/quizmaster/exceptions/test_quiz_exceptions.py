from quizmaster.exceptions.base import AppError
from quizmaster.exceptions.quiz import InvalidQuizData, QuizError, QuizNotFound, QuizTopicExists


def test_quiz_error_inherits_app_error():
    assert issubclass(QuizError, AppError)


def test_quiz_not_found_and_invalid_data_payloads():
    assert QuizNotFound("42-x").quiz_id == "42-x"
    err = InvalidQuizData("aucune question")
    assert err.reason == "aucune question"
    assert "aucune question" in str(err)


def test_quiz_topic_exists_key_depends_on_visibility():
    public = QuizTopicExists("Python", "public")
    private = QuizTopicExists("Python", "private")

    assert (public.topic, public.visibility) == ("Python", "public")
    assert public.key == "errorQuizTopicExistsPublic"
    assert private.key == "errorQuizTopicExistsPrivate"
