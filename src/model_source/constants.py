"""Well-known names shared between the provider and the cluster.

These values are part of the contract with the loader image and the
serving runtimes, so they are deliberately not configurable.
"""

# Mount root for staged model files inside the pod.
CONTAINER_MODEL_PATH = "/workspace/models/"

MODEL_VOLUME_NAME = "model-volume"
MODEL_RUNNER_CONTAINER_NAME = "model-runner"
MODEL_LOADER_CONTAINER_NAME = "model-loader"

DEFAULT_LOADER_IMAGE = "inftyai/model-loader:v0.0.10"

# Value of MODEL_SOURCE_TYPE understood by the loader image.
MODEL_SOURCE_MODEL_OBJ_STORE = "objstore"

# Prefix of directory-style (multi-file) model layouts.
MODEL_DIR_PREFIX = "models--"
GGUF_MARKER = ".gguf"

# Shared by S3 and GCS.
AWS_ACCESS_SECRET_NAME = "aws-access-secret"
AWS_ACCESS_KEY_ID = "AWS_ACCESS_KEY_ID"
AWS_ACCESS_KEY_SECRET = "AWS_SECRET_ACCESS_KEY"

OSS_ACCESS_SECRET_NAME = "oss-access-secret"
OSS_ACCESS_KEY_ID = "OSS_ACCESS_KEY_ID"
OSS_ACCESS_KEY_SECRET = "OSS_ACCESS_KEY_SECRET"


class LoaderEnv:
    """Environment variable names read by the loader image."""

    MODEL_SOURCE_TYPE = "MODEL_SOURCE_TYPE"
    PROVIDER = "PROVIDER"
    ENDPOINT = "ENDPOINT"
    BUCKET = "BUCKET"
    MODEL_PATH = "MODEL_PATH"
