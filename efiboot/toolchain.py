"Cross-compile the UEFI application with Cargo XBuild."

import logging
import os
import subprocess as sp

from . import runner as default_runner
from .config import BuildMode
from .errors import BuildFailure

LOG = logging.getLogger(__name__)

CARGO = "cargo"


def xbuild_command(cfg):
  "Arguments for building `cfg.target` in `cfg.mode`."

  cmd = [CARGO, "xbuild", "--target", cfg.target]
  if cfg.mode is BuildMode.RELEASE:
    cmd.append("--release")
  return cmd


def toolchain_env(paths, environ=None):
  "Environment for the toolchain, derived from `environ` (default: os.environ)."

  env = dict(os.environ if environ is None else environ)

  # Clear any Rust flags which might affect the build.
  env["RUSTFLAGS"] = ""
  # Let Cargo find custom target specs kept in the repository.
  env["RUST_TARGET_PATH"] = str(paths.root)

  return env


def compile(cfg, paths, run=default_runner.run, environ=None):
  "Build the application; raise BuildFailure unless the toolchain succeeds."

  cmd = xbuild_command(cfg)

  try:
    result = run(cmd, cwd=paths.root, env=toolchain_env(paths, environ))
  except OSError as exc:
    raise BuildFailure(f"could not start {cmd[0]}: {exc}") from exc

  try:
    result.check_returncode()
  except sp.CalledProcessError as exc:
    if exc.returncode < 0:
      raise BuildFailure(f"{cmd[0]} was killed by signal {-exc.returncode}") from exc
    raise BuildFailure(
      f"{cmd[0]} exited with status {exc.returncode}", exit_code=exc.returncode) from exc

  LOG.debug("toolchain finished for %s (%s)", cfg.target, cfg.mode)
