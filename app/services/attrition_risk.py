"""
Attrition risk scoring.

Eight weighted factors, each a risk value in [0, 1], combine into a 0-100
score. Likert answers map to (6 - v) / 5, eNPS to (10 - v) / 10 and comment
sentiment to (1 - s) / 2; an unanswered question counts as the neutral 0.5.
"""
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from app.schemas.attrition_risk import RiskFactor, RiskLevel

NEUTRAL_RISK = 0.5
RECOMMENDATION_THRESHOLD = 0.1
MAX_RECOMMENDED_FACTORS = 3

RISK_WEIGHTS: Dict[str, float] = {
    "permanence_expectation": 0.25,
    "enps_score": 0.20,
    "career_clarity": 0.15,
    "manager_interaction": 0.12,
    "sentiment_score": 0.10,
    "feedback": 0.08,
    "learning_opportunities": 0.05,
    "contribution": 0.05,
}

FACTOR_LABELS: Dict[str, str] = {
    "permanence_expectation": "Expectativa de Permanência",
    "enps_score": "Score eNPS",
    "career_clarity": "Clareza de Carreira",
    "manager_interaction": "Interação com Gestor",
    "sentiment_score": "Sentimento dos Comentários",
    "feedback": "Feedback",
    "learning_opportunities": "Oportunidades de Aprendizado",
    "contribution": "Senso de Contribuição",
}

RECOMMENDATIONS: Dict[str, str] = {
    "permanence_expectation": "Agendar conversa 1:1 para entender expectativas de permanência e planos futuros.",
    "enps_score": "Investigar motivos de insatisfação geral e trabalhar em melhorias específicas.",
    "career_clarity": "Criar plano de desenvolvimento individual com metas claras de carreira.",
    "manager_interaction": "Melhorar frequência e qualidade de feedback do gestor.",
    "sentiment_score": "Analisar comentários negativos e abordar preocupações específicas.",
    "feedback": "Estabelecer cadência regular de feedback construtivo.",
    "learning_opportunities": "Oferecer oportunidades de treinamento e desenvolvimento.",
    "contribution": "Reforçar a importância das contribuições do colaborador para a equipe.",
}

URGENT_RECOMMENDATION = "URGENTE: Agendar reunião imediata com RH e liderança para plano de retenção."
PRIORITY_RECOMMENDATION = "Priorizar ação preventiva para evitar perda do colaborador."

NOT_ANSWERED = "Não respondido"


@dataclass(frozen=True)
class LikertPhrasing:
    good: str
    moderate: str
    attention: str

    def describe(self, value: Optional[int]) -> str:
        if value is None:
            return NOT_ANSWERED
        if value >= 4:
            return self.good
        if value >= 3:
            return self.moderate
        return self.attention


LIKERT_PHRASING: Dict[str, LikertPhrasing] = {
    "permanence_expectation": LikertPhrasing(
        "Alta intenção de permanência",
        "Intenção moderada de permanência",
        "Baixa intenção de permanência - Atenção necessária",
    ),
    "career_clarity": LikertPhrasing(
        "Boa clareza sobre carreira",
        "Clareza moderada sobre carreira",
        "Pouca clareza sobre carreira - Atenção necessária",
    ),
    "manager_interaction": LikertPhrasing(
        "Boa interação com gestor",
        "Interação moderada com gestor",
        "Interação fraca com gestor - Atenção necessária",
    ),
    "feedback": LikertPhrasing(
        "Feedback adequado recebido",
        "Feedback parcialmente adequado",
        "Feedback insuficiente - Atenção necessária",
    ),
    "learning_opportunities": LikertPhrasing(
        "Boas oportunidades de aprendizado",
        "Oportunidades moderadas de aprendizado",
        "Poucas oportunidades de aprendizado - Atenção necessária",
    ),
    "contribution": LikertPhrasing(
        "Alto senso de contribuição",
        "Senso moderado de contribuição",
        "Baixo senso de contribuição - Atenção necessária",
    ),
}

# factor -> survey accessor for the Likert-backed factors
LIKERT_FACTOR_SOURCES: Dict[str, Callable[[Any], Optional[int]]] = {
    "permanence_expectation": lambda s: s.permanence_expectation,
    "career_clarity": lambda s: s.career_clarity,
    "manager_interaction": lambda s: s.manager_interaction,
    "feedback": lambda s: s.feedback,
    "learning_opportunities": lambda s: s.learning,
    "contribution": lambda s: s.contribution,
}


def likert_risk(value: Optional[int]) -> float:
    if value is None:
        return NEUTRAL_RISK
    return (6 - value) / 5


def enps_risk(value: Optional[int]) -> float:
    if value is None:
        return NEUTRAL_RISK
    return (10 - value) / 10


def sentiment_risk(score: float) -> float:
    return (1 - score) / 2


def describe_enps(value: Optional[int]) -> str:
    if value is None:
        return NOT_ANSWERED
    if value >= 9:
        return "Promotor - Muito satisfeito"
    if value >= 7:
        return "Passivo - Satisfeito"
    return "Detrator - Insatisfeito - Atenção necessária"


def describe_sentiment(score: float) -> str:
    if score > 0.3:
        return "Comentários predominantemente positivos"
    if score > -0.3:
        return "Comentários neutros"
    return "Comentários predominantemente negativos - Atenção necessária"


def _factor(key: str, value: float, description: str) -> RiskFactor:
    weight = RISK_WEIGHTS[key]
    value = max(0.0, min(1.0, value))  # out-of-range answers saturate
    return RiskFactor(
        factor=key,
        label=FACTOR_LABELS[key],
        value=value,
        weight=weight,
        contribution=value * weight,
        description=description,
    )


def calculate_risk_factors(survey: Any, sentiment_score: float) -> List[RiskFactor]:
    """The eight weighted factors for one survey, highest contribution first."""
    factors = [
        _factor(key, likert_risk(source(survey)), LIKERT_PHRASING[key].describe(source(survey)))
        for key, source in LIKERT_FACTOR_SOURCES.items()
    ]
    factors.append(_factor("enps_score", enps_risk(survey.enps), describe_enps(survey.enps)))
    factors.append(_factor("sentiment_score", sentiment_risk(sentiment_score), describe_sentiment(sentiment_score)))

    # Stable sort: ties keep weight-table order
    order = list(RISK_WEIGHTS)
    factors.sort(key=lambda f: order.index(f.factor))
    return sorted(factors, key=lambda f: f.contribution, reverse=True)


def risk_score(factors: List[RiskFactor]) -> float:
    score = sum(f.contribution for f in factors) * 100
    return round(max(0.0, min(100.0, score)), 1)


def get_risk_level(score: float) -> RiskLevel:
    if score >= 70:
        return RiskLevel.CRITICAL
    if score >= 50:
        return RiskLevel.HIGH
    if score >= 30:
        return RiskLevel.MODERATE
    return RiskLevel.LOW


def generate_recommendations(factors: List[RiskFactor], level: RiskLevel) -> List[str]:
    """Factors must already be sorted by contribution (as calculate_risk_factors returns them)."""
    recommendations = [
        RECOMMENDATIONS[f.factor]
        for f in factors[:MAX_RECOMMENDED_FACTORS]
        if f.contribution > RECOMMENDATION_THRESHOLD
    ]

    if level == RiskLevel.CRITICAL:
        recommendations.insert(0, URGENT_RECOMMENDATION)
    elif level == RiskLevel.HIGH:
        recommendations.insert(0, PRIORITY_RECOMMENDATION)

    return recommendations
