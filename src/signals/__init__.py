# src/signals/__init__.py
# ========================
# Signal Collectors — CandidateGuard
#
# Responsibility:
#   - Email reputation lookup      (email_lookup.py)
#   - Phone reputation lookup      (phone_lookup.py)
#   - AI-authorship estimation     (ai_detection.py, reply_parser.py)
#
# Every collector returns a SignalResult and never raises; the pipeline
# collapses failures into the conservative defaults from models.py.

from src.signals.models import (  # noqa: F401
    AiSignal,
    EmailSignal,
    LineType,
    PhoneSignal,
    DEFAULT_AI_SIGNAL,
    DEFAULT_EMAIL_SIGNAL,
    DEFAULT_PHONE_SIGNAL,
)
from src.signals.result import SignalResult  # noqa: F401
from src.signals.email_lookup import collect_email_signal  # noqa: F401
from src.signals.phone_lookup import collect_phone_signal  # noqa: F401
from src.signals.ai_detection import collect_ai_signal  # noqa: F401
from src.signals.reply_parser import parse_ai_reply  # noqa: F401
