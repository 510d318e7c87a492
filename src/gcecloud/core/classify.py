from __future__ import annotations
import logging
from typing import Any, Optional

from gcecloud.core.chain import as_error
from gcecloud.core.errors import ApiError

logger = logging.getLogger(__name__)


class Reason:
    """Reason codes the compute API puts in ErrorItem.reason."""
    NOT_FOUND = "notFound"
    ALREADY_EXISTS = "alreadyExists"
    INVALID = "invalid"
    RESOURCE_IN_USE = "resourceInUseByAnotherResource"
    USER_RATE_LIMIT = "userRateLimitExceeded"
    RATE_LIMIT = "rateLimitExceeded"


def is_gce_error(err: Any, reason: Optional[str]) -> bool:
    """
    True when the first ApiError found in err's wrap chain (err itself included)
    has an entry whose reason equals `reason`. Never raises; None/empty reason,
    None err and chains without an ApiError all give False.
    """
    if err is None or not reason:
        return False
    api_err = as_error(err, ApiError)
    if api_err is None:
        return False
    matched = any(item.reason == reason for item in api_err.errors)
    logger.debug("reason %r %s in %r", reason, "found" if matched else "not found", api_err)
    return matched


def is_not_found_error(err: Any) -> bool:
    return is_gce_error(err, Reason.NOT_FOUND)


def is_already_exists_error(err: Any) -> bool:
    return is_gce_error(err, Reason.ALREADY_EXISTS)


def is_invalid_error(err: Any) -> bool:
    return is_gce_error(err, Reason.INVALID)


def is_resource_in_use_error(err: Any) -> bool:
    return is_gce_error(err, Reason.RESOURCE_IN_USE)


def is_rate_limit_error(err: Any) -> bool:
    # user-level and project-level limits are reported under different reasons
    return is_gce_error(err, Reason.USER_RATE_LIMIT) or is_gce_error(err, Reason.RATE_LIMIT)
