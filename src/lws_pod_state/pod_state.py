"""Pure predicates over a group pod: restart, deletion, leadership, and readiness."""

from __future__ import annotations

from kubernetes.client import V1Pod, V1PodCondition

from lws_pod_state.config import (
    CONDITION_READY,
    CONDITION_TRUE,
    LEADER_WORKER_INDEX,
    POD_RUNNING,
    RESTART_TRACKED_PHASES,
    LabelKeys,
    get_label_keys,
)
from lws_pod_state.models import PodRole, PodState

# Note 1: Every predicate in this module is total. The reconciler polls them on
# every pass, so a missing status, label map, or condition list reads as "false"
# rather than raising. The Kubernetes client leaves absent lists and maps as None,
# hence the `or []` / `or {}` guards throughout.


def _phase(pod: V1Pod) -> str | None:
    return pod.status.phase if pod.status else None


def _labels(pod: V1Pod) -> dict[str, str]:
    return (pod.metadata.labels if pod.metadata else None) or {}


def has_restarted(pod: V1Pod) -> bool:
    """Return True when any init or main container of a pending/running pod has restarted."""
    if _phase(pod) not in RESTART_TRACKED_PHASES:
        return False

    # Note 2: Init-container statuses are scanned before main container statuses and
    # the scan stops at the first restarted container.
    for statuses in (pod.status.init_container_statuses, pod.status.container_statuses):
        for cs in statuses or []:
            if (cs.restart_count or 0) > 0:
                return True
    return False


def is_marked_for_deletion(pod: V1Pod) -> bool:
    """Return True when the pod carries a deletion timestamp."""
    return pod.metadata is not None and pod.metadata.deletion_timestamp is not None


def pod_role(pod: V1Pod, label_keys: LabelKeys | None = None) -> PodRole:
    """Derive the pod's role from its worker-index label."""
    keys = label_keys or get_label_keys()
    if _labels(pod).get(keys.worker_index) == LEADER_WORKER_INDEX:
        return PodRole.LEADER
    return PodRole.WORKER


def is_leader(pod: V1Pod, label_keys: LabelKeys | None = None) -> bool:
    """Return True when the pod is the leader of its group (worker index "0")."""
    return pod_role(pod, label_keys) is PodRole.LEADER


def get_pod_condition(pod: V1Pod, condition_type: str) -> tuple[int, V1PodCondition | None]:
    """Find the first condition of the given type.

    Returns the condition's index in the status list and the condition itself,
    or ``(-1, None)`` when the pod has no such condition.
    """
    if pod.status is None:
        return -1, None
    # Note 3: A plain linear scan. Condition lists are short and unordered, and a
    # malformed status with duplicate types resolves to the first entry in list order.
    for i, condition in enumerate(pod.status.conditions or []):
        if condition.type == condition_type:
            return i, condition
    return -1, None


def is_running_and_ready(pod: V1Pod) -> bool:
    """Return True when the pod is Running and its Ready condition is True."""
    if _phase(pod) != POD_RUNNING:
        return False
    _, condition = get_pod_condition(pod, CONDITION_READY)
    return condition is not None and condition.status == CONDITION_TRUE


def evaluate_pod(pod: V1Pod, label_keys: LabelKeys | None = None) -> PodState:
    """Run every predicate against the pod and return the combined reading."""
    metadata = pod.metadata
    return PodState(
        name=metadata.name if metadata else None,
        namespace=metadata.namespace if metadata else None,
        phase=_phase(pod),
        role=pod_role(pod, label_keys),
        restarted=has_restarted(pod),
        marked_for_deletion=is_marked_for_deletion(pod),
        running_and_ready=is_running_and_ready(pod),
    )
