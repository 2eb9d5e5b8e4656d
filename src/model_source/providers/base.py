"""Base class for model source providers.

Defines the ModelSourceProvider ABC the reconciler talks to, so it
never needs to know which protocol a model is stored behind.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kubernetes.client import V1PodTemplateSpec  # type: ignore[import-untyped]


class ModelSourceProvider(ABC):
    """Makes a model available inside a workload's pod template."""

    @abstractmethod
    def model_name(self) -> str:
        """Return the name the serving runtime knows the model by."""

    @abstractmethod
    def model_path(self, skip_loader: bool = False) -> str:
        """Return where the serving process should read the model from.

        Args:
            skip_loader: Whether the runtime fetches the model itself
                instead of reading a copy staged by the loader.
        """

    @abstractmethod
    def inject_model_loader(self, template: V1PodTemplateSpec, index: int = 0) -> None:
        """Add whatever the pod needs to have the model on disk at startup.

        Args:
            template: Pod template to mutate in place.
            index: Position of this model among the workload's models,
                used to keep init container names unique.
        """

    @abstractmethod
    def inject_model_env_vars(self, template: V1PodTemplateSpec) -> None:
        """Add credentials the serving runtime needs to reach the model.

        Args:
            template: Pod template to mutate in place.
        """
