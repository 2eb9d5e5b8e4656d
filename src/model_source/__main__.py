"""Entry point for rendering a model-serving pod template."""

import argparse
import logging
import sys
from typing import Any

import yaml
from kubernetes.client import (  # type: ignore[import-untyped]
    ApiClient,
    V1Container,
    V1EnvVar,
    V1ObjectMeta,
    V1PodSpec,
    V1PodTemplateSpec,
)

from model_source import __version__
from model_source.config import LogLevel, ModelSourceConfig
from model_source.constants import MODEL_RUNNER_CONTAINER_NAME
from model_source.providers import new_model_source_provider
from model_source.utils.errors import ModelSourceError


def setup_logging(level: LogLevel) -> None:
    """Configure logging for the command."""
    logging.basicConfig(
        level=level.value,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="model-source",
        description="Render the pod template that loads a model from its source URI",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--uri",
        required=True,
        help="Model source URI, e.g. s3://bucket/models/opt-125m",
    )
    parser.add_argument(
        "--model-name",
        default="",
        help="Name of the model resource (not needed for ollama:// URIs)",
    )
    parser.add_argument(
        "--index",
        type=int,
        default=0,
        help="Position of the model in the workload (default: 0)",
    )
    parser.add_argument(
        "--skip-loader",
        action="store_true",
        help="Let the runtime fetch the model itself instead of staging it",
    )
    parser.add_argument(
        "--image",
        default="vllm/vllm-openai:latest",
        help="Image of the model-runner container",
    )
    parser.add_argument(
        "--env",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Env var for the model-runner container (repeatable)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level (default: INFO)",
    )

    return parser.parse_args(argv)


def build_template(image: str, env: list[str]) -> V1PodTemplateSpec:
    """Build a template holding a single model-runner container."""
    env_vars = []
    for item in env:
        name, sep, value = item.partition("=")
        if not sep or not name:
            raise ValueError(f"Invalid env var {item!r}, expected KEY=VALUE")
        env_vars.append(V1EnvVar(name=name, value=value))

    return V1PodTemplateSpec(
        metadata=V1ObjectMeta(labels={"app": MODEL_RUNNER_CONTAINER_NAME}),
        spec=V1PodSpec(
            containers=[
                V1Container(name=MODEL_RUNNER_CONTAINER_NAME, image=image, env=env_vars or None)
            ]
        ),
    )


def render(template: V1PodTemplateSpec) -> dict[str, Any]:
    """Convert a template into its API (camelCase) dict form."""
    return ApiClient().sanitize_for_serialization(template)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    config_kwargs: dict[str, Any] = {}
    if args.log_level:
        config_kwargs["log_level"] = LogLevel(args.log_level)
    config = ModelSourceConfig(**config_kwargs)

    setup_logging(config.log_level)
    logger = logging.getLogger(__name__)

    try:
        provider = new_model_source_provider(args.model_name, args.uri, config=config)
        template = build_template(args.image, args.env)
    except (ModelSourceError, ValueError) as e:
        logger.error(f"Invalid model source: {e}")
        return 1

    logger.info(f"Model {provider.model_name()} at {provider.model_path(args.skip_loader)}")

    if not args.skip_loader:
        provider.inject_model_loader(template, args.index)
    provider.inject_model_env_vars(template)

    yaml.safe_dump(render(template), sys.stdout, sort_keys=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
