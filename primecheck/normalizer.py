import logging

from primecheck.errors import MalformedAnswerError

ACCEPTED_ANSWERS = frozenset({"yes", "no"})

logger = logging.getLogger(__name__)


def normalize_answer(raw: str) -> str:
    """Trim and lowercase *raw*; only a bare ``yes`` or ``no`` survives."""
    answer = raw.strip().lower()
    logger.info("Normalized response: %r", answer)
    if answer not in ACCEPTED_ANSWERS:
        raise MalformedAnswerError(raw)
    return answer
