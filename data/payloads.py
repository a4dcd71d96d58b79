"""
Request bodies and response shapes for the card API endpoints.
"""

import json
from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class CreateCardRequest:
    """Body of ``POST /api/card/integration/register``; image is raw base64."""

    id: str
    name: str
    consent_term_signed: bool
    image: str

    def to_payload(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "consentTermSigned": self.consent_term_signed,
            "image": self.image,
        }


@dataclass(frozen=True)
class VerifyCardRequest:
    """Body of the verify endpoint; image is a data URI."""

    id: str
    name: str
    detail: str
    image: str

    def to_payload(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "detail": self.detail,
            "image": self.image,
        }


@dataclass
class VerifyResult:
    id_log: str = ""
    percentage: str = ""
    success: bool = False
    status: int = 0
    message: str = ""
    reference_id: str = ""


@dataclass
class VerifyResponse:
    percentage: str = ""
    response: VerifyResult = field(default_factory=VerifyResult)

    @property
    def similarity(self) -> str:
        """Inner percentage, or the top-level one when the inner is empty."""
        return self.response.percentage or self.percentage


def _as_str(value) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        raise ValueError("expected a string, got a boolean")
    if isinstance(value, (int, float)):
        return str(value)
    raise ValueError(f"expected a string, got {type(value).__name__}")


def _as_int(value) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"expected a number, got {type(value).__name__}")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"expected an integer, got {value}")
    return int(value)


def _as_bool(value) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"expected a boolean, got {type(value).__name__}")
    return value


def _field(doc, name):
    """Look up a key exactly, then ignoring case (first match wins)."""
    if name in doc:
        return doc[name]
    lowered = name.lower()
    for key, value in doc.items():
        if key.lower() == lowered:
            return value
    return None


def parse_verify_response(raw) -> Optional[VerifyResponse]:
    """Decode a verify response body; return None when it does not fit.

    Keys match case-insensitively and absent fields, or a ``null`` body,
    keep their empty defaults.
    """
    try:
        doc = json.loads(raw)
        if doc is None:
            doc = {}
        if not isinstance(doc, dict):
            return None
        inner = _field(doc, "response") or {}
        if not isinstance(inner, dict):
            return None
        return VerifyResponse(
            percentage=_as_str(_field(doc, "percentage")),
            response=VerifyResult(
                id_log=_as_str(_field(inner, "id_Log")),
                percentage=_as_str(_field(inner, "percentage")),
                success=_as_bool(_field(inner, "success")),
                status=_as_int(_field(inner, "status")),
                message=_as_str(_field(inner, "message")),
                reference_id=_as_str(_field(inner, "reference_Id")),
            ),
        )
    except (ValueError, TypeError):
        return None
