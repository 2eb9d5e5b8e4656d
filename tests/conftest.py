"""Pytest fixtures for model source tests."""

import pytest
from kubernetes.client import (  # type: ignore[import-untyped]
    V1Container,
    V1EnvVar,
    V1PodSpec,
    V1PodTemplateSpec,
)

from model_source.config import ModelSourceConfig
from model_source.constants import MODEL_RUNNER_CONTAINER_NAME


@pytest.fixture
def config() -> ModelSourceConfig:
    """Configuration that ignores the environment."""
    return ModelSourceConfig(
        loader_image="registry.example.com/model-loader:test",
        _env_file=None,  # type: ignore[call-arg]
    )


@pytest.fixture
def template() -> V1PodTemplateSpec:
    """Pod template with a model-runner and a sidecar container."""
    return V1PodTemplateSpec(
        spec=V1PodSpec(
            containers=[
                V1Container(
                    name=MODEL_RUNNER_CONTAINER_NAME,
                    image="vllm/vllm-openai:latest",
                    env=[V1EnvVar(name="HTTP_PROXY", value="http://proxy.internal:3128")],
                ),
                V1Container(name="metrics-sidecar", image="prom/exporter:latest"),
            ]
        )
    )


@pytest.fixture
def bare_template() -> V1PodTemplateSpec:
    """Pod template whose model-runner has no env, mounts or volumes."""
    return V1PodTemplateSpec(
        spec=V1PodSpec(
            containers=[V1Container(name=MODEL_RUNNER_CONTAINER_NAME, image="ollama/ollama")]
        )
    )
