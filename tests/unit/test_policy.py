"""Unit tests for FailurePolicy and CheckerSettings."""

import math

import pytest

from contract_kernel.domain.location import LocationStyle
from contract_kernel.domain.policy import CheckerSettings, FailurePolicy
from contract_kernel.exceptions import InvalidPolicyError


class TestFailurePolicyParse:
    @pytest.mark.parametrize("text", ["raise", "RAISE", " Raise "])
    def test_raise(self, text):
        assert FailurePolicy.parse(text) is FailurePolicy.RAISE

    def test_report(self):
        assert FailurePolicy.parse("report") is FailurePolicy.REPORT

    def test_enum_passthrough(self):
        assert FailurePolicy.parse(FailurePolicy.REPORT) is FailurePolicy.REPORT

    def test_invalid(self):
        with pytest.raises(InvalidPolicyError) as exc_info:
            FailurePolicy.parse("ignore")
        assert exc_info.value.code == "INVALID_FAILURE_POLICY"
        assert exc_info.value.policy == "ignore"


class TestCheckerSettings:
    def test_defaults(self):
        settings = CheckerSettings()
        assert settings.policy is FailurePolicy.RAISE
        assert settings.float_tolerance == 1e-5
        assert settings.location_style is LocationStyle.BRACKET
        assert settings.snippet_length == 30
        assert settings.capture_locations is True

    @pytest.mark.parametrize("tolerance", [-0.1, math.inf, math.nan])
    def test_rejects_bad_tolerance(self, tolerance):
        with pytest.raises(ValueError):
            CheckerSettings(float_tolerance=tolerance)

    def test_zero_tolerance_allowed(self):
        assert CheckerSettings(float_tolerance=0.0).float_tolerance == 0.0

    def test_rejects_bad_snippet_length(self):
        with pytest.raises(ValueError):
            CheckerSettings(snippet_length=0)
