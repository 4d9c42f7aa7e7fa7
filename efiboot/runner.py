"Run external programs."

import logging
import shlex
import subprocess as sp

LOG = logging.getLogger(__name__)


def run(cmd, cwd=None, env=None):
  """Log and run a command, waiting for it to exit.

  The child inherits stdin/stdout/stderr, so compiler diagnostics and the
  emulator's serial console go straight to the terminal. Returns the
  CompletedProcess; checking the return code is up to the caller.
  """

  cmd = [str(arg) for arg in cmd]
  LOG.info("%s", shlex.join(cmd))
  return sp.run(cmd, cwd=cwd, env=env)
