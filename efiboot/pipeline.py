"The build and run operations."

import logging

from . import config, image, paths, qemu, runner, toolchain
from .errors import PipelineError, Stage

LOG = logging.getLogger(__name__)


class Pipeline:
  """Resolve, derive, compile, assemble and (for `run`) launch, in that order.

  Each step blocks until its external program exits. The first failure
  moves the pipeline to Stage.FAILED, is kept in `error` and propagates;
  whatever was already written stays on disk and nothing is retried.
  `history` lists every stage entered, starting with Stage.IDLE.
  """

  def __init__(self, overrides, cwd, run=runner.run, environ=None, startup_script=False):
    self.overrides = overrides
    self.cwd = cwd
    self.run_process = run
    self.environ = environ
    self.startup_script = startup_script

    self.cfg = None
    self.paths = None
    self.status = None
    self.error = None
    self.stage = Stage.IDLE
    self.history = [Stage.IDLE]

  def enter(self, stage):
    LOG.debug("%s -> %s", self.stage, stage)
    self.stage = stage
    self.history.append(stage)

  def fail(self, exc):
    self.error = exc
    self.enter(Stage.FAILED)

  def configure(self):
    self.enter(Stage.RESOLVING)
    self.cfg = config.resolve(self.overrides)
    LOG.debug("configuration: %s", self.cfg)

    self.enter(Stage.DERIVING)
    self.paths = paths.derive(self.cfg, self.cwd)

  def compile_and_assemble(self):
    self.configure()

    self.enter(Stage.COMPILING)
    toolchain.compile(self.cfg, self.paths, run=self.run_process, environ=self.environ)

    self.enter(Stage.ASSEMBLING)
    return image.assemble(self.paths, self.cfg, startup_script=self.startup_script)

  def build(self):
    "Compile the application and copy it into the ESP. Returns the boot file path."

    try:
      boot_file = self.compile_and_assemble()
    except PipelineError as exc:
      self.fail(exc)
      raise

    self.status = 0
    self.enter(Stage.EXITED)
    return boot_file

  def run(self):
    "Build, then boot the ESP in QEMU. Returns QEMU's exit status."

    try:
      self.compile_and_assemble()

      self.enter(Stage.LAUNCHING)
      status = qemu.launch(self.paths, self.cfg, run=self.run_process)
    except PipelineError as exc:
      self.fail(exc)
      raise

    self.status = status
    self.enter(Stage.EXITED)
    return status
