"""Leader address injection into the containers of a group pod."""

from __future__ import annotations

import structlog
from kubernetes.client import V1Container, V1EnvVar, V1Pod

from lws_pod_state.config import LabelKeys, get_label_keys
from lws_pod_state.errors import MissingLabelError

log = structlog.get_logger()


def _pod_name(pod: V1Pod) -> str | None:
    return pod.metadata.name if pod.metadata else None


def _require_label(pod: V1Pod, key: str, description: str) -> str:
    labels = (pod.metadata.labels if pod.metadata else None) or {}
    if key not in labels:
        log.warning("missing_group_label", pod=_pod_name(pod), label=key)
        raise MissingLabelError(_pod_name(pod), key, description)
    return labels[key]


def leader_address(pod: V1Pod, label_keys: LabelKeys | None = None) -> str:
    """Build the DNS address of the leader of the pod's group.

    The address has the form ``<name>-<index>.<name>.<namespace>``: the leader
    pod's hostname qualified by the group's headless service, which is assumed
    to share the group's name. The service itself is created elsewhere and is
    not checked here.

    Raises:
        MissingLabelError: If the group name or group index label is absent.
    """
    keys = label_keys or get_label_keys()
    # Note 1: Both labels are read before anything else happens, so a pod that
    # fails either lookup is never partially modified by add_leader_address.
    set_name = _require_label(pod, keys.set_name, "group name")
    group_index = _require_label(pod, keys.group_index, "group index")
    namespace = pod.metadata.namespace or ""
    return f"{set_name}-{group_index}.{set_name}.{namespace}"


def add_env_var_if_absent(container: V1Container, env_var: V1EnvVar) -> bool:
    """Prepend env_var to the container unless a variable of that name already exists.

    Only the name is compared; an existing variable keeps its own value.
    Returns True if the variable was inserted.
    """
    env = container.env or []
    if any(e.name == env_var.name for e in env):
        log.debug("leader_address_env_present", container=container.name, env=env_var.name)
        return False
    container.env = [env_var, *env]
    return True


def add_leader_address(pod: V1Pod, label_keys: LabelKeys | None = None) -> None:
    """Add the leader address environment variable to every container and init container.

    Containers that already define the variable are left untouched, so calling
    this repeatedly on the same pod is a no-op after the first call.

    Raises:
        MissingLabelError: If the group name or group index label is absent.
            No container is modified in that case.
    """
    keys = label_keys or get_label_keys()
    value = leader_address(pod, keys)

    injected = 0
    spec = pod.spec
    containers = (spec.containers or []) if spec else []
    init_containers = (spec.init_containers or []) if spec else []
    for container in [*containers, *init_containers]:
        # Note 2: Each container gets its own V1EnvVar instance so that later edits
        # to one container's env list cannot leak into another container.
        if add_env_var_if_absent(container, V1EnvVar(name=keys.leader_address_env, value=value)):
            injected += 1

    log.debug(
        "leader_address_injected",
        pod=_pod_name(pod),
        namespace=pod.metadata.namespace,
        address=value,
        injected=injected,
    )
