"""Shared test fixtures for all test modules."""

# Note 1: Pod builders live in builders.py as plain functions so tests can call them
# with varying arguments; only injectable fixtures are defined here.
from __future__ import annotations

import pytest
from builders import GROUP_INDEX_LABEL, SET_NAME_LABEL, WORKER_INDEX_LABEL

from lws_pod_state.config import LabelKeys


@pytest.fixture
def label_keys() -> LabelKeys:
    """Label keys with the default values, independent of the test environment."""
    return LabelKeys(
        set_name=SET_NAME_LABEL,
        group_index=GROUP_INDEX_LABEL,
        worker_index=WORKER_INDEX_LABEL,
        leader_address_env="LWS_LEADER_ADDRESS",
    )
