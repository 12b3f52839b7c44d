"""Pytest configuration and fixtures for all tests.

Keeps tests isolated from a developer's .env / shell mail settings so that no
test ever talks to a real SMTP relay.
"""

import os

import pytest
from fastapi.testclient import TestClient

from config import MailConfig
from mail_server.main import create_app

MAIL_ENV_VARS = [
    "EMAIL_USER",
    "EMAIL_PASS",
    "SMTP_HOST",
    "SMTP_PORT",
    "SMTP_SECURITY",
    "SMTP_TIMEOUT",
    "HOST",
    "PORT",
    "APP_ENV",
]


@pytest.fixture(autouse=True)
def isolate_from_env():
    """Clear mail-related env vars for the duration of each test."""
    original_values = {}
    for var in MAIL_ENV_VARS:
        if var in os.environ:
            original_values[var] = os.environ.pop(var)

    yield

    for var, value in original_values.items():
        os.environ[var] = value


@pytest.fixture
def config():
    return MailConfig(email_user="sender@example.com", email_pass="app-password")


@pytest.fixture
def client(config):
    return TestClient(create_app(config))
