"""Pytest configuration and shared fixtures."""

import pytest

from aclkit import Acl


@pytest.fixture
def acl():
    """Empty access control list."""
    return Acl()


@pytest.fixture
def blog_roles():
    """Role names used across the blog scenarios."""
    return ["administrator", "moderator"]


@pytest.fixture
def blog_resources():
    """Resource names used across the blog scenarios."""
    return ["blog.edit", "blog.delete", "blog.create", "blog.view"]


@pytest.fixture
def sample_config():
    """Sample policy configuration dictionary."""
    return {
        "logging": {
            "level": "DEBUG",
            "console_logging": False,
        },
        "roles": {
            "guest": {
                "allow": ["blog.view"],
            },
            "administrator": {
                "allow": ["blog.edit", "blog.create"],
                "deny": "blog.delete",
                "inherits": "guest",
            },
            "banned": None,
        },
    }
