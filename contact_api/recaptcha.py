import logging
from typing import Optional

import requests

from contact_api import settings

log = logging.getLogger(__name__)


def verify_recaptcha(token: Optional[str], secret: Optional[str] = None,
                     threshold: Optional[float] = None) -> bool:
    """
    Check a reCAPTCHA token with Google's siteverify endpoint.

    Works for both widget versions:
      - v3 replies carry a `score`; it must reach `threshold`
      - v2 replies don't; `success` alone decides
    Without a token or a configured secret nothing is verified.
    Network/HTTP errors propagate to the caller.
    """
    secret = settings.RECAPTCHA_SECRET_KEY if secret is None else secret
    threshold = settings.RECAPTCHA_THRESHOLD if threshold is None else threshold
    if not token or not secret:
        return False

    resp = requests.post(
        settings.RECAPTCHA_VERIFY_URL,
        data={"secret": secret, "response": token},
        timeout=settings.RECAPTCHA_TIMEOUT,
    )
    resp.raise_for_status()
    data = resp.json()

    if not data.get("success"):
        log.warning("recaptcha rejected: %s", data.get("error-codes"))
        return False
    if data.get("score") is not None:
        return float(data["score"]) >= threshold
    return True
