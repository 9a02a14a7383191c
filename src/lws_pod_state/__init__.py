"""Pod state evaluation and leader address injection for leader/worker pod groups."""

from __future__ import annotations

from lws_pod_state.config import LabelKeys, get_label_keys
from lws_pod_state.errors import MissingLabelError
from lws_pod_state.leader_address import add_env_var_if_absent, add_leader_address, leader_address
from lws_pod_state.logging_config import configure_logging
from lws_pod_state.models import PodRole, PodState
from lws_pod_state.pod_state import (
    evaluate_pod,
    get_pod_condition,
    has_restarted,
    is_leader,
    is_marked_for_deletion,
    is_running_and_ready,
    pod_role,
)

__all__ = [
    "LabelKeys",
    "MissingLabelError",
    "PodRole",
    "PodState",
    "add_env_var_if_absent",
    "add_leader_address",
    "configure_logging",
    "evaluate_pod",
    "get_label_keys",
    "get_pod_condition",
    "has_restarted",
    "is_leader",
    "is_marked_for_deletion",
    "is_running_and_ready",
    "leader_address",
    "pod_role",
]
