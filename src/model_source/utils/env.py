"""Helpers for container environment variables."""

from __future__ import annotations

import copy
from collections.abc import Iterable

from kubernetes.client import (  # type: ignore[import-untyped]
    V1Container,
    V1EnvVar,
    V1EnvVarSource,
    V1SecretKeySelector,
)


def secret_env_var(name: str, secret_name: str, key: str | None = None) -> V1EnvVar:
    """Build an env var read from a secret key.

    The reference is optional, so a missing secret leaves the variable
    empty instead of blocking pod admission.
    """
    return V1EnvVar(
        name=name,
        value_from=V1EnvVarSource(
            secret_key_ref=V1SecretKeySelector(
                name=secret_name,
                key=key or name,
                optional=True,
            )
        ),
    )


def copy_env(env: list[V1EnvVar] | None) -> list[V1EnvVar]:
    """Return an independent copy of a container's env list."""
    return copy.deepcopy(list(env or []))


def find_container(containers: list[V1Container] | None, name: str) -> V1Container | None:
    """Find a container by name."""
    for container in containers or []:
        if container.name == name:
            return container
    return None


def ensure_env_vars(container: V1Container, env_vars: Iterable[V1EnvVar]) -> list[str]:
    """Append env vars whose names the container does not define yet.

    Existing entries are never overwritten.

    Returns:
        Names of the env vars that were added.
    """
    if container.env is None:
        container.env = []

    existing = {env.name for env in container.env}
    added = []
    for env_var in env_vars:
        if env_var.name in existing:
            continue
        container.env.append(env_var)
        existing.add(env_var.name)
        added.append(env_var.name)
    return added
