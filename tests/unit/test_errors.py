# tests/unit/test_errors.py

from __future__ import annotations
import sys
from pathlib import Path

# Make "src" importable
sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from gcecloud.core.errors import ApiError, AnnotatedError, ErrorItem, ComputeError, MalformedEndpointError


def test_api_error_str_and_reasons():
    err = ApiError(404, [ErrorItem(reason="notFound", message="disk d not found")], "Not found")
    assert str(err) == "Error 404: Not found, notFound"
    assert err.reasons == ["notFound"]
    assert isinstance(err, ComputeError)


def test_api_error_without_message_or_reasons():
    assert str(ApiError(500)) == "Error 500"
    assert ApiError(500).errors == []


def test_annotated_error_links():
    inner = ApiError(409, [ErrorItem(reason="alreadyExists")])
    outer = AnnotatedError("creating disk d", inner)
    assert outer.unwrap() is inner
    assert outer.__cause__ is inner
    assert str(outer) == "creating disk d: Error 409, alreadyExists"


def test_malformed_endpoint_error_hierarchy():
    assert issubclass(MalformedEndpointError, ComputeError)
    assert issubclass(MalformedEndpointError, ValueError)
