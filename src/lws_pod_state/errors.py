"""Errors raised while preparing group pods."""

from __future__ import annotations


class MissingLabelError(ValueError):
    """A pod lacks a group label required to build its leader address."""

    def __init__(self, pod_name: str | None, label_key: str, description: str) -> None:
        self.pod_name = pod_name
        self.label_key = label_key
        self.description = description
        msg = f"Failure constructing environment variables, no {description} label found for pod {pod_name}"
        super().__init__(msg)
