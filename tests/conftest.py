"""
Shared test fixtures for the pdftree test suite.
"""

import pytest


@pytest.fixture
def page_args():
    """Page arguments as the layout renderer passes them to render props."""
    return 1, 2, {"width": 1080}


@pytest.fixture
def provider():
    """Component that stores 'mytest' in context and renders its first child."""

    def Provider(props, context, update_context):  # noqa: N802
        update_context({"mytest": "test"})
        return props["children"][0]

    return Provider
