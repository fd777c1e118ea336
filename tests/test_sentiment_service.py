import pytest

from app.services.sentiment_service import SentimentService


@pytest.fixture
def service(db_session):
    return SentimentService(db_session)


@pytest.fixture
def commented(make_employee, make_survey):
    first = make_employee()
    second = make_employee()
    make_survey(
        first,
        feedback=5,
        feedback_comment="Excelente feedback, muito satisfeito!",
        manager_interaction=1,
        manager_interaction_comment="Gestor ruim e estressante, muito frustrado",
        learning_comment="   ",
    )
    make_survey(
        second,
        feedback=2,
        feedback_comment="O dia foi normal sem nada especial",
        enps=9,
        enps_comment="Bom lugar para trabalhar",
    )
    return first, second


def test_blank_comments_are_skipped(service, commented):
    comments = service.analyze_all_comments()
    assert len(comments) == 4
    assert "learning_comment" not in {c.field for c in comments}


def test_comment_carries_related_score(service, commented):
    first, _ = commented
    comments = {c.field: c for c in service.analyze_all_comments(employee_id=first.id)}
    assert comments["feedback_comment"].related_score == 5
    assert comments["feedback_comment"].field_label == "Feedback"
    assert comments["manager_interaction_comment"].sentiment.label == "negative"


def test_summary(service, commented):
    summary = service.get_summary()
    assert summary.total_comments == 4
    assert summary.distribution.positive == 2
    assert summary.distribution.negative == 1
    assert summary.distribution.neutral == 1
    assert [f.field for f in summary.by_field] == [
        "feedback_comment", "manager_interaction_comment", "enps_comment",
    ]
    assert summary.top_positive[0].sentiment.score >= summary.top_positive[-1].sentiment.score
    assert summary.top_negative[0].field == "manager_interaction_comment"

    positive_words = {w.word for w in summary.word_frequency.positive}
    negative_words = {w.word for w in summary.word_frequency.negative}
    assert {"excelente", "satisfeito", "bom"} <= positive_words
    assert {"ruim", "estressante", "frustrado"} <= negative_words


def test_summary_without_comments(service):
    summary = service.get_summary()
    assert summary.total_comments == 0
    assert summary.average_sentiment == 0
    assert summary.by_field == []


def test_field_sentiment(service, commented):
    field = service.get_field_sentiment("feedback_comment")
    assert field.total_comments == 2
    assert len(field.examples.positive) == 1
    assert len(field.examples.neutral) == 1
    assert service.get_field_sentiment("salary_comment") is None


def test_employee_sentiment(service, commented):
    first, _ = commented
    result = service.get_employee_sentiment(first.id)
    assert len(result.comments) == 2
    assert result.distribution.positive == 1
    assert result.distribution.negative == 1


def test_score_correlation_needs_five_points(service, make_employee, make_survey):
    employee = make_employee()
    texts = ["Péssimo", "Ruim", "Normal", "Bom", "Excelente"]
    for score, text in enumerate(texts, start=1):
        make_survey(employee, feedback=score, feedback_comment=text, enps=score, enps_comment=text)
    make_survey(employee, learning=5, learning_comment="Ótimo")

    results = {r.field: r for r in service.get_score_correlation()}
    assert set(results) == {"feedback_comment", "enps_comment"}
    assert results["feedback_comment"].data_points == 5
    assert results["feedback_comment"].correlation > 0.9


def test_list_comments_filters_and_pages(service, commented):
    page = service.list_comments(field="feedback_comment")
    assert page.pagination.total == 2

    positives = service.list_comments(label="positive", limit=1)
    assert len(positives.data) == 1
    assert positives.pagination.total_pages == 2


def test_comment_fields():
    fields = SentimentService.comment_fields()
    assert len(fields) == 8
    assert fields[-1].key == "enps_comment"
    assert fields[-1].related_score == "enps"
