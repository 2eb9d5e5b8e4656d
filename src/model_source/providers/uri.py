"""Model source provider for models addressed by a URI."""

from __future__ import annotations

import logging

from kubernetes.client import (  # type: ignore[import-untyped]
    V1Container,
    V1EmptyDirVolumeSource,
    V1EnvVar,
    V1HostPathVolumeSource,
    V1PodTemplateSpec,
    V1Volume,
    V1VolumeMount,
)

from model_source.config import ModelSourceConfig, get_config
from model_source.constants import (
    AWS_ACCESS_KEY_ID,
    AWS_ACCESS_KEY_SECRET,
    AWS_ACCESS_SECRET_NAME,
    CONTAINER_MODEL_PATH,
    GGUF_MARKER,
    MODEL_DIR_PREFIX,
    MODEL_LOADER_CONTAINER_NAME,
    MODEL_RUNNER_CONTAINER_NAME,
    MODEL_SOURCE_MODEL_OBJ_STORE,
    MODEL_VOLUME_NAME,
    OSS_ACCESS_KEY_ID,
    OSS_ACCESS_KEY_SECRET,
    OSS_ACCESS_SECRET_NAME,
    LoaderEnv,
)
from model_source.models import ModelSource, SourceProtocol
from model_source.providers.base import ModelSourceProvider
from model_source.utils.env import copy_env, ensure_env_vars, find_container, secret_env_var

logger = logging.getLogger(__name__)

# Secret name and the two key names holding credentials, per object store.
CREDENTIALS: dict[SourceProtocol, tuple[str, tuple[str, str]]] = {
    SourceProtocol.S3: (AWS_ACCESS_SECRET_NAME, (AWS_ACCESS_KEY_ID, AWS_ACCESS_KEY_SECRET)),
    SourceProtocol.GCS: (AWS_ACCESS_SECRET_NAME, (AWS_ACCESS_KEY_ID, AWS_ACCESS_KEY_SECRET)),
    SourceProtocol.OSS: (OSS_ACCESS_SECRET_NAME, (OSS_ACCESS_KEY_ID, OSS_ACCESS_KEY_SECRET)),
}


def credential_env_vars(protocol: SourceProtocol) -> list[V1EnvVar]:
    """Return the optional secret-backed credential env vars for a protocol."""
    if protocol not in CREDENTIALS:
        return []
    secret_name, keys = CREDENTIALS[protocol]
    return [secret_env_var(key, secret_name) for key in keys]


def loader_container_name(index: int) -> str:
    """Name of the loader init container for the model at ``index``."""
    if index == 0:
        return MODEL_LOADER_CONTAINER_NAME
    return f"{MODEL_LOADER_CONTAINER_NAME}-{index}"


def host_volume_name(index: int) -> str:
    """Name of the host path volume for the model at ``index``.

    Later models get a suffix so they never clash with the volume of the
    first model, host path or shared emptyDir.
    """
    if index == 0:
        return MODEL_VOLUME_NAME
    return f"{MODEL_VOLUME_NAME}-{index}"


class URIProvider(ModelSourceProvider):
    """Loads models stored on the host, in an object store, or by Ollama.

    Example paths for object stores with the loader enabled:
        oss://bucket.endpoint/models/opt-125m   -> /workspace/models/models--opt-125m
        oss://bucket.endpoint/models/model.gguf -> /workspace/models/model.gguf
    """

    def __init__(self, source: ModelSource, config: ModelSourceConfig | None = None) -> None:
        self._source = source
        self._config = config or get_config()

    @property
    def source(self) -> ModelSource:
        """Get the source descriptor."""
        return self._source

    @property
    def protocol(self) -> SourceProtocol:
        """Get the source protocol."""
        return self._source.protocol

    def model_name(self) -> str:
        # Ollama identifies models by its own tag, carried in model_path.
        if self.protocol == SourceProtocol.OLLAMA:
            return self._source.model_path
        return self._source.model_name

    def model_path(self, skip_loader: bool = False) -> str:
        if self.protocol == SourceProtocol.HOST:
            return self._source.model_path

        # The runtime loads from remote storage itself, e.g. s3://bucket/path.
        if skip_loader:
            return self._source.uri

        filename = self._source.model_path.split("/")[-1]
        # A segment already named models--<name> is not prefixed twice.
        if GGUF_MARKER in filename or filename.startswith(MODEL_DIR_PREFIX):
            return CONTAINER_MODEL_PATH + filename
        return CONTAINER_MODEL_PATH + MODEL_DIR_PREFIX + filename

    def inject_model_loader(self, template: V1PodTemplateSpec, index: int = 0) -> None:
        protocol = self.protocol
        if protocol == SourceProtocol.OLLAMA:
            # Ollama pulls models at runtime.
            return
        if protocol == SourceProtocol.HOST:
            self._inject_host_path(template, index)
            return
        if protocol.is_object_store:
            self._inject_loader_container(template, index)
            return
        logger.debug(f"No model loader for protocol {protocol}, skipping")

    def inject_model_env_vars(self, template: V1PodTemplateSpec) -> None:
        if self.protocol not in CREDENTIALS:
            return

        for container in template.spec.containers or []:
            if container.name != MODEL_RUNNER_CONTAINER_NAME:
                continue
            added = ensure_env_vars(container, credential_env_vars(self.protocol))
            if added:
                logger.debug(f"Added credential env vars {added} to container {container.name}")

    def _inject_host_path(self, template: V1PodTemplateSpec, index: int) -> None:
        spec = template.spec
        path = self._source.model_path
        volume_name = host_volume_name(index)

        if spec.volumes is None:
            spec.volumes = []
        spec.volumes.append(
            V1Volume(name=volume_name, host_path=V1HostPathVolumeSource(path=path))
        )

        runner = find_container(spec.containers, MODEL_RUNNER_CONTAINER_NAME)
        if runner is None:
            logger.debug(f"No {MODEL_RUNNER_CONTAINER_NAME} container, {path} not mounted")
            return
        if runner.volume_mounts is None:
            runner.volume_mounts = []
        runner.volume_mounts.append(
            V1VolumeMount(name=volume_name, mount_path=path, read_only=True)
        )
        logger.debug(f"Mounted host path {path} into {MODEL_RUNNER_CONTAINER_NAME}")

    def _inject_loader_container(self, template: V1PodTemplateSpec, index: int) -> None:
        spec = template.spec
        runner = find_container(spec.containers, MODEL_RUNNER_CONTAINER_NAME)
        if runner is None and spec.containers:
            runner = spec.containers[0]

        init_container = V1Container(
            name=loader_container_name(index),
            image=self._config.loader_image,
            image_pull_policy=self._config.loader_image_pull_policy,
            volume_mounts=[V1VolumeMount(name=MODEL_VOLUME_NAME, mount_path=CONTAINER_MODEL_PATH)],
        )
        loader_env = self._loader_env_vars()
        redefined = {env.name for env in loader_env}
        # Same context as the runner, e.g. proxy settings, minus the names
        # the loader sets itself so each name appears once.
        init_container.env = [
            env
            for env in copy_env(runner.env if runner is not None else None)
            if env.name not in redefined
        ]
        init_container.env.extend(loader_env)

        if spec.init_containers is None:
            spec.init_containers = []
        spec.init_containers.append(init_container)

        self._ensure_shared_volume(template, runner)
        logger.debug(
            f"Injected {init_container.name} for {self.protocol.value} model "
            f"{self._source.model_path}"
        )

    def _loader_env_vars(self) -> list[V1EnvVar]:
        source = self._source
        env_vars = [
            V1EnvVar(name=LoaderEnv.MODEL_SOURCE_TYPE, value=MODEL_SOURCE_MODEL_OBJ_STORE),
            V1EnvVar(name=LoaderEnv.PROVIDER, value=source.protocol.value),
        ]
        if source.protocol == SourceProtocol.OSS:
            env_vars.append(V1EnvVar(name=LoaderEnv.ENDPOINT, value=source.endpoint))
        env_vars.extend(
            [
                V1EnvVar(name=LoaderEnv.BUCKET, value=source.bucket),
                V1EnvVar(name=LoaderEnv.MODEL_PATH, value=source.model_path),
            ]
        )
        env_vars.extend(credential_env_vars(source.protocol))
        return env_vars

    def _ensure_shared_volume(
        self, template: V1PodTemplateSpec, runner: V1Container | None
    ) -> None:
        """Add the emptyDir shared by loaders and the runner, once per pod."""
        spec = template.spec
        if spec.volumes is None:
            spec.volumes = []
        existing = next((v for v in spec.volumes if v.name == MODEL_VOLUME_NAME), None)
        if existing is None:
            spec.volumes.append(
                V1Volume(name=MODEL_VOLUME_NAME, empty_dir=V1EmptyDirVolumeSource())
            )
        elif existing.empty_dir is None:
            logger.warning(
                f"Volume {MODEL_VOLUME_NAME} is not an emptyDir, "
                f"{self.protocol.value} model {self._source.model_path} is staged into it"
            )

        if runner is None or runner.name != MODEL_RUNNER_CONTAINER_NAME:
            return
        if runner.volume_mounts is None:
            runner.volume_mounts = []
        if not any(mount.name == MODEL_VOLUME_NAME for mount in runner.volume_mounts):
            runner.volume_mounts.append(
                V1VolumeMount(
                    name=MODEL_VOLUME_NAME, mount_path=CONTAINER_MODEL_PATH, read_only=True
                )
            )
