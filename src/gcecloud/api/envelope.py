from __future__ import annotations
import json
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ValidationError

from gcecloud.core.errors import ApiError, ErrorItem


class _ErrorItemBody(BaseModel):
    reason: str = ""
    message: str = ""
    domain: Optional[str] = None


class _ErrorBody(BaseModel):
    code: Optional[int] = None
    message: str = ""
    errors: List[_ErrorItemBody] = []


class _ErrorEnvelope(BaseModel):
    error: _ErrorBody


Body = Union[bytes, str, Dict[str, Any], None]


def _as_text(body: Body) -> str:
    if body is None:
        return ""
    if isinstance(body, bytes):
        return body.decode("utf-8", errors="replace")
    if isinstance(body, dict):
        return json.dumps(body)
    return str(body)


def parse_error_body(status: int, body: Body) -> ApiError:
    """
    Decode the compute API error envelope:
        {"error": {"code": 404, "message": "...", "errors": [{"reason": "notFound", ...}]}}
    Bodies that are not JSON or lack the envelope still produce an ApiError,
    with no reason entries and the raw text as message.
    """
    text = _as_text(body)
    try:
        if isinstance(body, dict):
            env = _ErrorEnvelope.model_validate(body)
        else:
            env = _ErrorEnvelope.model_validate_json(text)
    except (ValidationError, ValueError):
        return ApiError(status, [], text.strip(), body=text)

    err = env.error
    items = [ErrorItem(reason=i.reason, message=i.message, domain=i.domain) for i in err.errors]
    # the envelope's own code wins; the HTTP status is only a fallback
    code = err.code if err.code is not None else status
    return ApiError(code, items, err.message, body=text)


def check_response(status: int, body: Body = None) -> None:
    """Raise the decoded ApiError for any non-2xx status."""
    if 200 <= int(status) <= 299:
        return None
    raise parse_error_body(int(status), body)
