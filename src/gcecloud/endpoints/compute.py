from __future__ import annotations
import logging
import re
from enum import Enum
from typing import Tuple
from urllib.parse import SplitResult, urlsplit, urlunsplit

from gcecloud.core.errors import MalformedEndpointError

logger = logging.getLogger(__name__)

STAGING_PREFIX = "staging_"

_TOKEN = re.compile(r"[A-Za-z0-9][A-Za-z0-9_.-]*")


class ApiVersion(str, Enum):
    V1 = "v1"
    BETA = "beta"
    ALPHA = "alpha"


def _parse(base: str) -> Tuple[SplitResult, str, str]:
    if not isinstance(base, str) or not base:
        raise MalformedEndpointError(f"Endpoint must be a non-empty string, got {base!r}")
    # urlsplit drops tabs and newlines silently; refuse them instead
    if any(c.isspace() for c in base):
        raise MalformedEndpointError(f"Endpoint {base!r} contains whitespace")
    try:
        parts = urlsplit(base)
    except ValueError as e:
        raise MalformedEndpointError(f"Endpoint {base!r} is not a valid URL: {e}") from e
    if not parts.scheme or not parts.netloc:
        raise MalformedEndpointError(f"Endpoint {base!r} has no scheme or host")

    path = parts.path[:-1] if parts.path.endswith("/") else parts.path
    segments = path.split("/")[1:]
    if not segments or any(s == "" for s in segments):
        raise MalformedEndpointError(f"Endpoint {base!r} has no version segment")

    segment = segments[-1]
    if segment == STAGING_PREFIX:
        raise MalformedEndpointError(f"Endpoint {base!r} has an empty staging version")
    if not _TOKEN.fullmatch(segment):
        raise MalformedEndpointError(f"Endpoint {base!r} has an invalid version segment {segment!r}")

    prefix = "/" + "/".join(segments[:-1]) if len(segments) > 1 else ""
    return parts, prefix, segment


def split_version_segment(base: str) -> Tuple[str, str]:
    """
    Split the path of `base` into (prefix_path, version_segment).
    "https://www.googleapis.com/compute/staging_v1/" -> ("/compute", "staging_v1")
    """
    _, prefix, segment = _parse(base)
    return prefix, segment


def is_staging_endpoint(base: str) -> bool:
    _, segment = split_version_segment(base)
    return segment.startswith(STAGING_PREFIX)


def construct_compute_endpoint(base: str, variant: str) -> str:
    """
    Rewrite the version segment of `base` to `variant`, keeping a staging marker:
        .../compute/staging_v1/ + alpha -> .../compute/staging_alpha/
        .../compute/v1/         + beta  -> .../compute/beta/
    Raises MalformedEndpointError rather than guessing on bad input.
    """
    variant = variant.value if isinstance(variant, ApiVersion) else variant
    if not isinstance(variant, str) or not _TOKEN.fullmatch(variant) or variant == STAGING_PREFIX:
        raise MalformedEndpointError(f"Invalid API variant {variant!r}")

    parts, prefix, segment = _parse(base)
    if segment.startswith(STAGING_PREFIX) and not variant.startswith(STAGING_PREFIX):
        new_segment = STAGING_PREFIX + variant
    else:
        new_segment = variant

    # urlsplit lowercases the scheme; keep it as the caller wrote it
    scheme = base[:len(parts.scheme)]
    endpoint = urlunsplit((scheme, parts.netloc, f"{prefix}/{new_segment}/", parts.query, parts.fragment))
    logger.debug("compute endpoint %s -> %s (variant %s)", base, endpoint, variant)
    return endpoint
