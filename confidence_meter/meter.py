import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence, Tuple

import numpy as np

from confidence_meter.calibration import confidence, entropy, softmax
from confidence_meter.config import HIGH_MIN_CONFIDENCE, MEDIUM_MIN_CONFIDENCE, MIN_CANDIDATES
from confidence_meter.preprocessing import Candidate

logger = logging.getLogger(__name__)


class NotEnoughCandidatesError(ValueError):
    pass


class ConfidenceCategory(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass
class ConfidenceLabel:
    label: str
    category: ConfidenceCategory
    reason: str

    @property
    def css_class(self) -> str:
        return self.category.value

    @property
    def rationale(self) -> str:
        return self.reason


@dataclass
class RankedCandidate:
    label: str
    score: float
    probability: float


@dataclass
class MeterResult:
    temperature: float
    ranked: List[RankedCandidate]
    probabilities: List[float]
    entropy: float
    confidence: float
    label: ConfidenceLabel


def classify(conf: float) -> ConfidenceLabel:
    if conf >= HIGH_MIN_CONFIDENCE:
        return ConfidenceLabel(
            label="Confident",
            category=ConfidenceCategory.HIGH,
            reason="The top candidate clearly stands out.",
        )

    if conf >= MEDIUM_MIN_CONFIDENCE:
        return ConfidenceLabel(
            label="Split decision",
            category=ConfidenceCategory.MEDIUM,
            reason="Several candidates are competing.",
        )

    return ConfidenceLabel(
        label="Hard to call",
        category=ConfidenceCategory.LOW,
        reason="The distribution is nearly flat with no deciding factor.",
    )


def temperature_status(temperature: float) -> Tuple[str, str]:
    if temperature <= 0.5:
        return "Low temperature: the leader runs away, high confidence", "status-hot"

    if temperature <= 1.2:
        return "Medium temperature: a typical distribution", "status-normal"

    if temperature <= 2.0:
        return "High temperature: the distribution flattens", "status-cool"

    return "Very high temperature: nearly uniform, hard to call", "status-cold"


def evaluate_candidates(
    candidates: Sequence[Candidate],
    temperature: float,
) -> MeterResult:
    if len(candidates) < MIN_CANDIDATES:
        raise NotEnoughCandidatesError("Enter at least two scores.")

    # 1) Distribution over the candidates, in input order
    proba = softmax([c.score for c in candidates], temperature)

    # 2) Ranking for the chart (ties keep input order)
    order = np.argsort(-proba, kind="stable")
    ranked = [
        RankedCandidate(
            label=candidates[i].name,
            score=float(candidates[i].score),
            probability=float(proba[i]),
        )
        for i in order
    ]

    # 3) Confidence + label for the meter
    h = entropy(proba)
    conf = confidence(proba)
    label = classify(conf)

    logger.debug(
        "Evaluated %d candidates at T=%.3f: confidence=%.2f (%s)",
        len(candidates),
        temperature,
        conf,
        label.category.value,
    )

    return MeterResult(
        temperature=float(temperature),
        ranked=ranked,
        probabilities=[float(p) for p in proba],
        entropy=h,
        confidence=conf,
        label=label,
    )
