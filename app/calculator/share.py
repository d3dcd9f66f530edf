# app/calculator/share.py

import base64
import binascii
import json
import logging
from typing import Any, Optional

from .schemas import CalculatorInput
from .validation import validate_input, validate_or_raise

logger = logging.getLogger(__name__)


def encode_share_token(inputs: CalculatorInput) -> str:
    """
    Serialize inputs into a URL-safe token.

    JSON with sorted camelCase keys, base64url without padding, so the
    same inputs always give the same token.
    """
    data = json.dumps(inputs.model_dump(by_alias=True), sort_keys=True, separators=(",", ":"))
    return base64.urlsafe_b64encode(data.encode("utf-8")).decode("ascii").rstrip("=")


def _b64_to_text(token: str) -> str:
    # Accept legacy links encoded with the standard alphabet too
    cleaned = token.strip().replace("+", "-").replace("/", "_").rstrip("=")
    padded = cleaned + "=" * (-len(cleaned) % 4)
    raw = base64.b64decode(padded, altchars=b"-_", validate=True)
    return raw.decode("utf-8")


def decode_share_token(token: Any) -> Optional[CalculatorInput]:
    """
    Reverse encode_share_token.

    Returns None for anything unusable (bad base64, bad JSON, wrong
    shape, out-of-range values). Callers get no detail on why.
    """
    if not isinstance(token, str) or not token.strip():
        return None

    try:
        payload = json.loads(_b64_to_text(token))
    except (binascii.Error, ValueError) as e:
        logger.debug("[share] undecodable token: %s", e)
        return None

    ok, errors = validate_input(payload)
    if not ok:
        logger.debug("[share] token rejected: %s", [e["code"] for e in errors])
        return None

    return validate_or_raise(payload)
