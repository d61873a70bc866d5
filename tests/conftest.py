"""Test configuration and fixtures for the catalog."""

from tests.fixtures import *  # noqa: F401,F403
