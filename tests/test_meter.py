import math

import pytest

from confidence_meter.calibration import InvalidTemperatureError
from confidence_meter.meter import (
    ConfidenceCategory,
    NotEnoughCandidatesError,
    classify,
    evaluate_candidates,
    temperature_status,
)
from confidence_meter.preprocessing import Candidate, parse_candidates


def _candidates(scores):
    return [Candidate(name=f"c{i}", score=s) for i, s in enumerate(scores)]


@pytest.mark.parametrize(
    "conf, expected",
    [
        (100.0, ConfidenceCategory.HIGH),
        (70.0, ConfidenceCategory.HIGH),
        (69.999, ConfidenceCategory.MEDIUM),
        (40.0, ConfidenceCategory.MEDIUM),
        (39.999, ConfidenceCategory.LOW),
        (0.0, ConfidenceCategory.LOW),
    ],
)
def test_classify_band_boundaries(conf, expected):
    assert classify(conf).category == expected


def test_classify_carries_label_and_reason():
    high = classify(85.0)
    assert high.label == "Confident"
    assert high.reason == "The top candidate clearly stands out."
    assert high.css_class == "high"
    assert high.rationale == high.reason

    assert classify(55.0).label == "Split decision"
    assert classify(10.0).label == "Hard to call"
    assert classify(10.0).css_class == "low"


@pytest.mark.parametrize(
    "T, css",
    [
        (0.1, "status-hot"),
        (0.5, "status-hot"),
        (0.6, "status-normal"),
        (1.2, "status-normal"),
        (1.3, "status-cool"),
        (2.0, "status-cool"),
        (2.1, "status-cold"),
        (5.0, "status-cold"),
    ],
)
def test_temperature_status_bands(T, css):
    text, cls = temperature_status(T)
    assert cls == css
    assert text


class TestEvaluateCandidates:
    def test_dominant_leader_is_high_confidence(self):
        result = evaluate_candidates(_candidates([5.0, 1.0, 0.5, 0.2]), 1.0)
        assert result.ranked[0].label == "c0"
        assert result.ranked[0].probability == max(result.probabilities)
        assert result.label.category == ConfidenceCategory.HIGH

    def test_close_race_is_low_confidence(self):
        result = evaluate_candidates(_candidates([2.1, 2.0, 1.9, 1.8]), 1.0)
        assert max(result.probabilities) < 0.3
        assert result.confidence < 40.0
        assert result.label.category == ConfidenceCategory.LOW

    def test_sharp_temperature_is_near_one_hot(self):
        result = evaluate_candidates(_candidates([3.0, 1.0, 0.5]), 0.1)
        assert result.ranked[0].probability > 0.999
        assert result.confidence > 99.9

    def test_flat_temperature_is_near_uniform(self):
        result = evaluate_candidates(_candidates([3.0, 1.0, 0.5]), 5.0)
        assert result.probabilities == pytest.approx([1 / 3] * 3, abs=0.12)
        assert result.confidence < 5.0

    def test_ranking_is_descending_and_keeps_scores(self):
        cands = [Candidate("low", 0.2), Candidate("top", 4.0), Candidate("mid", 1.5)]
        result = evaluate_candidates(cands, 1.0)
        assert [r.label for r in result.ranked] == ["top", "mid", "low"]
        assert [r.score for r in result.ranked] == [4.0, 1.5, 0.2]
        probs = [r.probability for r in result.ranked]
        assert probs == sorted(probs, reverse=True)
        # input order preserved in the raw distribution
        assert result.probabilities[1] == probs[0]

    def test_ties_keep_input_order(self):
        cands = [Candidate("a", 1.0), Candidate("b", 2.0), Candidate("c", 2.0), Candidate("d", 1.0)]
        result = evaluate_candidates(cands, 1.0)
        assert [r.label for r in result.ranked] == ["b", "c", "a", "d"]

    def test_entropy_is_reported(self):
        result = evaluate_candidates(_candidates([1.0, 1.0]), 1.0)
        assert result.entropy == pytest.approx(0.6931471805599453)
        assert result.confidence == pytest.approx(0.0, abs=1e-9)

    def test_huge_parsed_scores_give_finite_distribution(self):
        result = evaluate_candidates(parse_candidates("A:1e308\nB:-1e308"), 0.5)
        assert result.probabilities == [1.0, 0.0]
        assert result.ranked[0].label == "A"
        assert result.confidence == 100.0

    def test_huge_close_scores_keep_their_spread(self):
        result = evaluate_candidates(parse_candidates("A:1e308\nB:9.9e307"), 1e306)
        assert all(math.isfinite(p) for p in result.probabilities)
        assert sum(result.probabilities) == pytest.approx(1.0)
        assert result.confidence < 100.0

    @pytest.mark.parametrize("scores", [[], [3.0]])
    def test_requires_two_candidates(self, scores):
        with pytest.raises(NotEnoughCandidatesError, match="at least two"):
            evaluate_candidates(_candidates(scores), 1.0)

    def test_invalid_temperature_propagates(self):
        with pytest.raises(InvalidTemperatureError):
            evaluate_candidates(_candidates([1.0, 2.0]), 0.0)

    def test_same_input_same_output(self):
        cands = _candidates([2.5, 1.8, 1.2, 0.5])
        assert evaluate_candidates(cands, 0.8) == evaluate_candidates(cands, 0.8)
