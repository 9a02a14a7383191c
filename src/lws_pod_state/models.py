"""Pydantic v2 models describing the evaluated state of a group pod."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


# Note 1: The role is derived once from the worker-index label and carried as an
# enum, so call sites compare against PodRole.LEADER instead of repeating the
# raw label string comparison. StrEnum members serialise as their plain values.
class PodRole(StrEnum):
    """Role of a pod within its leader/worker group."""

    LEADER = "leader"
    WORKER = "worker"


class PodState(BaseModel):
    """Snapshot of the predicates a reconciliation pass needs for one pod."""

    # Note 2: frozen=True makes instances immutable and hashable. A PodState is a
    # point-in-time reading; it must not be edited after the predicates ran.
    model_config = ConfigDict(frozen=True)

    name: str | None = None
    namespace: str | None = None
    phase: str | None = None
    role: PodRole
    restarted: bool
    marked_for_deletion: bool
    running_and_ready: bool
