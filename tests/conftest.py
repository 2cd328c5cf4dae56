"""Fixtures for the test suite."""

import pytest
from django.utils.functional import empty

import getresponse


@pytest.fixture(autouse=True)
def reset_client():
    """
    Reset the lazy GetResponse client after each test.

    The client is built once from settings.GETRESPONSE, tests overriding the
    setting need a fresh handler.
    """
    yield
    getresponse.client._wrapped = empty
    getresponse.client_handler._backend = None
    getresponse.client_handler._client = None
    getresponse.client_handler.__dict__.pop("backend", None)
