"Pipeline stages and the errors each of them can raise."

import enum


class Stage(enum.Enum):
  IDLE = "Idle"
  RESOLVING = "Resolving"
  DERIVING = "Deriving"
  COMPILING = "Compiling"
  ASSEMBLING = "Assembling"
  LAUNCHING = "Launching"
  EXITED = "Exited"
  FAILED = "Failed"

  def __str__(self):
    return self.value


class PipelineError(Exception):
  "Base class for a failure that stops the pipeline."

  stage = Stage.IDLE
  exit_code = 1

  def __init__(self, message, exit_code=None):
    super().__init__(message)
    if exit_code is not None:
      self.exit_code = exit_code

  def __str__(self):
    return f"{self.stage}: {self.args[0]}"


class ConfigError(PipelineError):
  "An override was empty or not understood."

  stage = Stage.RESOLVING
  exit_code = 2


class BuildFailure(PipelineError):
  "The toolchain failed to start or exited unsuccessfully."

  stage = Stage.COMPILING
  exit_code = 1


class IOFailure(PipelineError):
  "The ESP tree could not be written."

  stage = Stage.ASSEMBLING
  # EX_IOERR
  exit_code = 74


class MissingArtifact(IOFailure):
  "The toolchain exited cleanly but the expected .efi file is not there."

  def __init__(self, path):
    super().__init__(f"build artifact not found at {path}")
    self.path = path


class LaunchFailure(PipelineError):
  "The emulator could not be started or was killed."

  stage = Stage.LAUNCHING
  # EX_UNAVAILABLE
  exit_code = 69
