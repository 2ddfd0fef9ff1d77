"""
tests/test_scorer.py
=====================
Risk Scorer Tests

Test categories:
    1. Per-signal contributions (email, phone, AI breakpoints)
    2. Level classification boundaries
    3. Summation and capping at 100
    4. Monotonicity in each signal's severity
    5. Response formatting of the verdict

All tests are offline: no LLM or API calls.
"""

import os
import sys
import unittest

# Ensure project root is on sys.path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from src.risk.scorer import (
    RiskLevel,
    classify_level,
    compute_verdict,
    _score_ai,
    _score_email,
    _score_phone,
)
from src.risk.formatter import format_verdict
from src.signals.models import (
    AiSignal,
    EmailSignal,
    LineType,
    PhoneSignal,
    DEFAULT_AI_SIGNAL,
    DEFAULT_EMAIL_SIGNAL,
    DEFAULT_PHONE_SIGNAL,
)
from src.submission import CandidateSubmission


# ===================================================================
# Test fixtures
# ===================================================================

def _good_email() -> EmailSignal:
    return EmailSignal(valid_format=True, disposable=False)


def _good_phone() -> PhoneSignal:
    return PhoneSignal(valid=True, line_type=LineType.OTHER)


def _ai(probability: int) -> AiSignal:
    return AiSignal(probability=probability, reasoning="test reasoning")


def _submission() -> CandidateSubmission:
    return CandidateSubmission(
        email="jane@example.com",
        phone="+14155550100",
        name="Jane Doe",
    )


# ===================================================================
# 1. Per-signal contributions
# ===================================================================

class TestSignalContributions(unittest.TestCase):

    def test_clean_email_adds_nothing(self):
        self.assertEqual(_score_email(_good_email()), 0)

    def test_invalid_email_format_adds_30(self):
        self.assertEqual(_score_email(EmailSignal(valid_format=False, disposable=False)), 30)

    def test_disposable_email_adds_30(self):
        self.assertEqual(_score_email(EmailSignal(valid_format=True, disposable=True)), 30)

    def test_invalid_and_disposable_adds_30_once(self):
        self.assertEqual(_score_email(EmailSignal(valid_format=False, disposable=True)), 30)

    def test_valid_phone_adds_nothing(self):
        self.assertEqual(_score_phone(_good_phone()), 0)

    def test_unknown_line_type_on_valid_phone_adds_nothing(self):
        self.assertEqual(_score_phone(PhoneSignal(valid=True, line_type=LineType.UNKNOWN)), 0)

    def test_invalid_phone_adds_25(self):
        self.assertEqual(_score_phone(PhoneSignal(valid=False, line_type=LineType.OTHER)), 25)

    def test_voip_phone_adds_25(self):
        self.assertEqual(_score_phone(PhoneSignal(valid=True, line_type=LineType.VOIP)), 25)

    def test_ai_breakpoints_are_exact(self):
        cases = {0: 0, 40: 0, 41: 25, 55: 25, 70: 25, 71: 45, 100: 45}
        for probability, expected in cases.items():
            with self.subTest(probability=probability):
                self.assertEqual(_score_ai(_ai(probability)), expected)


# ===================================================================
# 2. Level classification
# ===================================================================

class TestClassifyLevel(unittest.TestCase):

    def test_level_boundaries(self):
        cases = {
            0: RiskLevel.LOW,
            39: RiskLevel.LOW,
            40: RiskLevel.MEDIUM,
            59: RiskLevel.MEDIUM,
            60: RiskLevel.HIGH,
            79: RiskLevel.HIGH,
            80: RiskLevel.CRITICAL,
            100: RiskLevel.CRITICAL,
        }
        for score, expected in cases.items():
            with self.subTest(score=score):
                self.assertEqual(classify_level(score), expected)

    def test_level_values_are_display_names(self):
        self.assertEqual(
            [level.value for level in RiskLevel],
            ["Low", "Medium", "High", "Critical"],
        )


# ===================================================================
# 3. Summation and capping
# ===================================================================

class TestComputeVerdict(unittest.TestCase):

    def test_all_clean_is_zero_low(self):
        verdict = compute_verdict(_good_email(), _good_phone(), _ai(10))
        self.assertEqual(verdict.score, 0)
        self.assertEqual(verdict.level, RiskLevel.LOW)

    def test_email_and_phone_sum_to_medium(self):
        verdict = compute_verdict(
            EmailSignal(valid_format=False, disposable=False),
            PhoneSignal(valid=True, line_type=LineType.VOIP),
            _ai(0),
        )
        self.assertEqual(verdict.score, 55)
        self.assertEqual(verdict.level, RiskLevel.MEDIUM)

    def test_email_plus_medium_ai_is_medium(self):
        verdict = compute_verdict(
            EmailSignal(valid_format=True, disposable=True),
            _good_phone(),
            _ai(41),
        )
        self.assertEqual(verdict.score, 55)
        self.assertEqual(verdict.level, RiskLevel.MEDIUM)

    def test_phone_plus_medium_ai_is_medium(self):
        verdict = compute_verdict(
            _good_email(),
            PhoneSignal(valid=False, line_type=LineType.UNKNOWN),
            _ai(70),
        )
        self.assertEqual(verdict.score, 50)
        self.assertEqual(verdict.level, RiskLevel.MEDIUM)

    def test_phone_plus_high_ai_is_high(self):
        verdict = compute_verdict(
            _good_email(),
            PhoneSignal(valid=False, line_type=LineType.OTHER),
            _ai(71),
        )
        self.assertEqual(verdict.score, 70)
        self.assertEqual(verdict.level, RiskLevel.HIGH)

    def test_email_plus_high_ai_is_high(self):
        verdict = compute_verdict(
            EmailSignal(valid_format=False, disposable=True),
            _good_phone(),
            _ai(95),
        )
        self.assertEqual(verdict.score, 75)
        self.assertEqual(verdict.level, RiskLevel.HIGH)

    def test_all_risks_cap_at_100(self):
        verdict = compute_verdict(
            EmailSignal(valid_format=False, disposable=False),
            PhoneSignal(valid=True, line_type=LineType.VOIP),
            _ai(95),
        )
        self.assertEqual(verdict.score, 100)
        self.assertEqual(verdict.level, RiskLevel.CRITICAL)

    def test_all_defaults_score_medium(self):
        """Every collector failing biases toward caution, not trust."""
        verdict = compute_verdict(
            DEFAULT_EMAIL_SIGNAL, DEFAULT_PHONE_SIGNAL, DEFAULT_AI_SIGNAL,
        )
        self.assertEqual(verdict.score, 55)
        self.assertEqual(verdict.level, RiskLevel.MEDIUM)

    def test_verdict_carries_signals(self):
        email, phone, ai = _good_email(), _good_phone(), _ai(20)
        verdict = compute_verdict(email, phone, ai)
        self.assertIs(verdict.email, email)
        self.assertIs(verdict.phone, phone)
        self.assertIs(verdict.ai, ai)

    def test_score_bounds_over_grid(self):
        emails = [_good_email(), EmailSignal(valid_format=False, disposable=True)]
        phones = [_good_phone(), PhoneSignal(valid=True, line_type=LineType.VOIP)]
        for email in emails:
            for phone in phones:
                for probability in range(0, 101, 5):
                    verdict = compute_verdict(email, phone, _ai(probability))
                    self.assertGreaterEqual(verdict.score, 0)
                    self.assertLessEqual(verdict.score, 100)

    def test_determinism(self):
        args = (EmailSignal(False, True), PhoneSignal(True, LineType.VOIP), _ai(65))
        self.assertEqual(compute_verdict(*args), compute_verdict(*args))


# ===================================================================
# 4. Monotonicity
# ===================================================================

class TestMonotonicity(unittest.TestCase):

    def test_score_non_decreasing_in_ai_probability(self):
        previous = -1
        for probability in range(0, 101):
            score = compute_verdict(_good_email(), _good_phone(), _ai(probability)).score
            self.assertGreaterEqual(score, previous)
            previous = score

    def test_bad_email_never_lowers_score(self):
        for probability in (0, 50, 90):
            good = compute_verdict(_good_email(), _good_phone(), _ai(probability)).score
            bad = compute_verdict(
                EmailSignal(valid_format=False, disposable=True),
                _good_phone(),
                _ai(probability),
            ).score
            self.assertGreaterEqual(bad, good)

    def test_bad_phone_never_lowers_score(self):
        for probability in (0, 50, 90):
            good = compute_verdict(_good_email(), _good_phone(), _ai(probability)).score
            bad = compute_verdict(
                _good_email(),
                PhoneSignal(valid=True, line_type=LineType.VOIP),
                _ai(probability),
            ).score
            self.assertGreaterEqual(bad, good)


# ===================================================================
# 5. Response formatting
# ===================================================================

class TestFormatVerdict(unittest.TestCase):

    def test_clean_candidate_body(self):
        verdict = compute_verdict(_good_email(), _good_phone(), _ai(20))
        body = format_verdict(_submission(), verdict)
        self.assertEqual(body, {
            "success": True,
            "candidateName": "Jane Doe",
            "candidateEmail": "jane@example.com",
            "riskScore": 0,
            "riskLevel": "Low",
            "emailStatus": "Valid email format",
            "emailValid": True,
            "phoneStatus": "Valid phone",
            "phoneValid": True,
            "aiAnalysis": "test reasoning",
            "details": "Email: ✓ | Phone: ✓ | AI Resume: ✓ Human-written",
        })

    def test_voip_phone_is_suspicious_and_not_valid(self):
        verdict = compute_verdict(
            _good_email(), PhoneSignal(valid=True, line_type=LineType.VOIP), _ai(0),
        )
        body = format_verdict(_submission(), verdict)
        self.assertEqual(body["phoneStatus"], "VoIP/Suspicious")
        self.assertFalse(body["phoneValid"])
        self.assertIn("Phone: ✓", body["details"])

    def test_invalid_phone_status(self):
        verdict = compute_verdict(_good_email(), DEFAULT_PHONE_SIGNAL, _ai(0))
        body = format_verdict(_submission(), verdict)
        self.assertEqual(body["phoneStatus"], "Invalid phone")
        self.assertFalse(body["phoneValid"])
        self.assertIn("Phone: ✗", body["details"])

    def test_invalid_email_status(self):
        verdict = compute_verdict(DEFAULT_EMAIL_SIGNAL, _good_phone(), _ai(0))
        body = format_verdict(_submission(), verdict)
        self.assertEqual(body["emailStatus"], "Invalid email format")
        self.assertFalse(body["emailValid"])
        self.assertIn("Email: ✗", body["details"])

    def test_disposable_but_well_formed_email_reports_valid_format(self):
        verdict = compute_verdict(
            EmailSignal(valid_format=True, disposable=True), _good_phone(), _ai(0),
        )
        body = format_verdict(_submission(), verdict)
        self.assertEqual(body["emailStatus"], "Valid email format")
        self.assertEqual(body["riskScore"], 30)

    def test_details_flags_ai_above_50(self):
        at_50 = format_verdict(_submission(), compute_verdict(_good_email(), _good_phone(), _ai(50)))
        at_51 = format_verdict(_submission(), compute_verdict(_good_email(), _good_phone(), _ai(51)))
        self.assertTrue(at_50["details"].endswith("✓ Human-written"))
        self.assertTrue(at_51["details"].endswith("⚠️ Possible AI"))

    def test_missing_name_is_none(self):
        submission = CandidateSubmission(email="a@b.co", phone="123")
        body = format_verdict(submission, compute_verdict(_good_email(), _good_phone(), _ai(0)))
        self.assertIsNone(body["candidateName"])


if __name__ == "__main__":
    unittest.main()
