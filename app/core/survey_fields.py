"""
Enumerated survey field descriptors.

Every loop that walks "all competency fields" or "all comment fields" goes
through these tuples, so a survey attribute is only ever read through its
descriptor's accessor.
"""
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Tuple


@dataclass(frozen=True)
class LikertField:
    key: str
    label: str
    accessor: Callable[[Any], Optional[int]] = field(repr=False, compare=False)

    def value_of(self, survey: Any) -> Optional[int]:
        return self.accessor(survey)


@dataclass(frozen=True)
class CommentField:
    key: str
    label: str
    related_score: str
    accessor: Callable[[Any], Optional[str]] = field(repr=False, compare=False)
    score_accessor: Callable[[Any], Optional[int]] = field(repr=False, compare=False)

    def text_of(self, survey: Any) -> Optional[str]:
        return self.accessor(survey)

    def score_of(self, survey: Any) -> Optional[int]:
        return self.score_accessor(survey)

    def to_dict(self) -> Dict[str, str]:
        return {"key": self.key, "label": self.label, "related_score": self.related_score}


LIKERT_FIELDS: Tuple[LikertField, ...] = (
    LikertField("role_interest", "Interesse no Cargo", lambda s: s.role_interest),
    LikertField("contribution", "Contribuição", lambda s: s.contribution),
    LikertField("learning", "Aprendizado e Desenvolvimento", lambda s: s.learning),
    LikertField("feedback", "Feedback", lambda s: s.feedback),
    LikertField("manager_interaction", "Interação com Gestor", lambda s: s.manager_interaction),
    LikertField("career_clarity", "Clareza de Carreira", lambda s: s.career_clarity),
    LikertField("permanence_expectation", "Expectativa de Permanência", lambda s: s.permanence_expectation),
)

# eNPS is not a Likert field but shares the accessor shape for correlation matrices
ENPS_FIELD = LikertField("enps", "eNPS", lambda s: s.enps)

COMMENT_FIELDS: Tuple[CommentField, ...] = (
    CommentField("role_interest_comment", "Interesse no Cargo", "role_interest",
                 lambda s: s.role_interest_comment, lambda s: s.role_interest),
    CommentField("contribution_comment", "Contribuição", "contribution",
                 lambda s: s.contribution_comment, lambda s: s.contribution),
    CommentField("learning_comment", "Aprendizado e Desenvolvimento", "learning",
                 lambda s: s.learning_comment, lambda s: s.learning),
    CommentField("feedback_comment", "Feedback", "feedback",
                 lambda s: s.feedback_comment, lambda s: s.feedback),
    CommentField("manager_interaction_comment", "Interação com Gestor", "manager_interaction",
                 lambda s: s.manager_interaction_comment, lambda s: s.manager_interaction),
    CommentField("career_clarity_comment", "Clareza de Carreira", "career_clarity",
                 lambda s: s.career_clarity_comment, lambda s: s.career_clarity),
    CommentField("permanence_expectation_comment", "Expectativa de Permanência", "permanence_expectation",
                 lambda s: s.permanence_expectation_comment, lambda s: s.permanence_expectation),
    CommentField("enps_comment", "eNPS", "enps",
                 lambda s: s.enps_comment, lambda s: s.enps),
)

LIKERT_FIELDS_BY_KEY: Dict[str, LikertField] = {f.key: f for f in LIKERT_FIELDS}
COMMENT_FIELDS_BY_KEY: Dict[str, CommentField] = {f.key: f for f in COMMENT_FIELDS}
