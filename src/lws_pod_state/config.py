"""Label keys, phase constants, and environment variable overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

# Note 1: Pod phases and condition values are plain strings in the Kubernetes Python
# client (V1PodStatus.phase is a str, not an enum), so they are compared as strings.
POD_PENDING = "Pending"
POD_RUNNING = "Running"
POD_SUCCEEDED = "Succeeded"
POD_FAILED = "Failed"
POD_UNKNOWN = "Unknown"

# Note 2: Only pods that are still starting or serving can "restart" in a way the
# reconciler cares about. A Succeeded or Failed pod keeps its historical restart
# counts, which must not be reported as a fresh restart.
RESTART_TRACKED_PHASES = frozenset({POD_PENDING, POD_RUNNING})

CONDITION_READY = "Ready"
CONDITION_TRUE = "True"

# Worker index label value carried by the group leader.
LEADER_WORKER_INDEX = "0"


@dataclass(frozen=True)
class LabelKeys:
    """Label keys read from group pods, with environment variable overrides."""

    set_name: str = field(
        default_factory=lambda: os.environ.get("LWS_SET_NAME_LABEL", "leaderworkerset.sigs.k8s.io/name")
    )
    group_index: str = field(
        default_factory=lambda: os.environ.get("LWS_GROUP_INDEX_LABEL", "leaderworkerset.sigs.k8s.io/group-index")
    )
    worker_index: str = field(
        default_factory=lambda: os.environ.get("LWS_WORKER_INDEX_LABEL", "leaderworkerset.sigs.k8s.io/worker-index")
    )
    leader_address_env: str = field(
        default_factory=lambda: os.environ.get("LWS_LEADER_ADDRESS_ENV_NAME", "LWS_LEADER_ADDRESS")
    )


def get_label_keys() -> LabelKeys:
    """Return label key configuration with environment variable overrides applied."""
    return LabelKeys()
