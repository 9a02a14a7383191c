"""Tests for config.py: label key defaults and environment variable overrides."""

# Note 1: LabelKeys reads the environment when an instance is created, not at import
# time. patch.dict therefore only needs to wrap the constructor call, and the
# original environment is restored when the with-block exits.
from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from lws_pod_state.config import LEADER_WORKER_INDEX, RESTART_TRACKED_PHASES, LabelKeys, get_label_keys

_OVERRIDE_VARS = (
    "LWS_SET_NAME_LABEL",
    "LWS_GROUP_INDEX_LABEL",
    "LWS_WORKER_INDEX_LABEL",
    "LWS_LEADER_ADDRESS_ENV_NAME",
)


@pytest.fixture
def clean_env():
    env = {k: v for k, v in os.environ.items() if k not in _OVERRIDE_VARS}
    with patch.dict(os.environ, env, clear=True):
        yield


class TestLabelKeys:
    def test_defaults(self, clean_env: None) -> None:
        keys = LabelKeys()
        assert keys.set_name == "leaderworkerset.sigs.k8s.io/name"
        assert keys.group_index == "leaderworkerset.sigs.k8s.io/group-index"
        assert keys.worker_index == "leaderworkerset.sigs.k8s.io/worker-index"
        assert keys.leader_address_env == "LWS_LEADER_ADDRESS"

    @pytest.mark.parametrize(
        "env_var,attr",
        [
            ("LWS_SET_NAME_LABEL", "set_name"),
            ("LWS_GROUP_INDEX_LABEL", "group_index"),
            ("LWS_WORKER_INDEX_LABEL", "worker_index"),
            ("LWS_LEADER_ADDRESS_ENV_NAME", "leader_address_env"),
        ],
    )
    def test_env_override(self, clean_env: None, env_var: str, attr: str) -> None:
        with patch.dict(os.environ, {env_var: "example.com/override"}):
            keys = get_label_keys()
        assert getattr(keys, attr) == "example.com/override"

    def test_frozen(self) -> None:
        keys = LabelKeys()
        with pytest.raises(AttributeError):
            keys.set_name = "other"  # type: ignore[misc]


class TestConstants:
    def test_restart_tracked_phases(self) -> None:
        assert RESTART_TRACKED_PHASES == {"Pending", "Running"}

    def test_leader_worker_index(self) -> None:
        assert LEADER_WORKER_INDEX == "0"
