"""Error Translation tests — the shared failure routine."""

import asyncio
import logging

import pytest

from firmbox.core.errors import (
    ErrorContext,
    InternalError,
    InvalidArgumentError,
    ModelProviderError,
)
from firmbox.services.error_translation import translate_failures

_CTX = ErrorContext(endpoint="generateBusinessPlan")


def test_success_passes_through():
    with translate_failures("fixed", _CTX):
        value = 1
    assert value == 1


def test_invalid_argument_is_not_translated():
    original = InvalidArgumentError("Missing required data", ["companyName"])
    with pytest.raises(InvalidArgumentError) as exc_info:
        with translate_failures("fixed", _CTX):
            raise original
    assert exc_info.value is original


def test_provider_error_translated_and_logged(caplog):
    with caplog.at_level(logging.ERROR, logger="firmbox.services.error_translation"):
        with pytest.raises(InternalError) as exc_info:
            with translate_failures("fixed", _CTX):
                raise ModelProviderError("upstream 529", "server_error")
    assert exc_info.value.message == "fixed"
    assert exc_info.value.context is _CTX
    record = caplog.records[-1]
    assert record.api_error_type == "server_error"
    assert "upstream 529" in record.getMessage()


def test_any_exception_translated():
    with pytest.raises(InternalError) as exc_info:
        with translate_failures("fixed", _CTX):
            raise ValueError("bad")
    assert isinstance(exc_info.value.__cause__, ValueError)


def test_cancellation_passes_through():
    with pytest.raises(asyncio.CancelledError):
        with translate_failures("fixed", _CTX):
            raise asyncio.CancelledError()
