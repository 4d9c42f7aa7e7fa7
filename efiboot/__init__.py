"Build a UEFI application into an ESP tree and boot it in QEMU."

from .config import BuildMode, ResolvedConfig, resolve
from .errors import (
  BuildFailure, ConfigError, IOFailure, LaunchFailure, MissingArtifact,
  PipelineError, Stage,
)
from .paths import PathSet, derive
from .pipeline import Pipeline

__version__ = "0.1.0"
