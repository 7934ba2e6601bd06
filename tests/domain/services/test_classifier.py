"""Tests for the fusion of signals into a classification."""

import pytest

from obfuscation_checker.domain.models import EvaluationResult, Severity
from obfuscation_checker.domain.services import classify


@pytest.mark.unit
class TestClassify:
    """Tests for classify() and the derived EvaluationResult properties."""

    def test_ratio_threshold_is_strict(self) -> None:
        assert not classify(0.4, False, False).is_obfuscated
        assert classify(0.40000001, False, False).is_obfuscated

    @pytest.mark.parametrize("percentage", [0.0, 0.1, 0.4, 1.0])
    def test_marker_attribute_always_obfuscated(self, percentage: float) -> None:
        result = classify(percentage, True, False)
        assert result.is_obfuscated
        assert result.severity is Severity.OBFUSCATED

    @pytest.mark.parametrize("percentage", [0.0, 0.3])
    def test_initializer_always_obfuscated(self, percentage: float) -> None:
        assert classify(percentage, False, True).is_obfuscated

    @pytest.mark.parametrize(
        "percentage, severity",
        [
            (0.0, Severity.NOT_OBFUSCATED),
            (0.2, Severity.NOT_OBFUSCATED),
            (0.21, Severity.LIGHTLY_OBFUSCATED),
            (0.4, Severity.LIGHTLY_OBFUSCATED),
            (0.41, Severity.OBFUSCATED),
        ],
    )
    def test_severity_tiers(self, percentage: float, severity: Severity) -> None:
        assert classify(percentage, False, False).severity is severity

    def test_result_is_immutable(self) -> None:
        result = classify(0.5, False, False)
        with pytest.raises(AttributeError):
            result.renaming_percentage = 0.1  # type: ignore[misc]

    def test_percentage_out_of_range(self) -> None:
        with pytest.raises(ValueError):
            EvaluationResult(1.5, False, False)

    def test_severity_string(self) -> None:
        assert str(Severity.LIGHTLY_OBFUSCATED) == "lightly obfuscated"
