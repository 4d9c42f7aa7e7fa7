"Command-line entry point."

import argparse
import logging
import os

from . import config, runner
from .errors import PipelineError
from .log import setup_logging
from .pipeline import Pipeline

LOG = logging.getLogger(__name__)

# 128 + SIGINT
EXIT_INTERRUPTED = 130


def add_verbosity(parser, default=False):
  verbosity = parser.add_mutually_exclusive_group()
  verbosity.add_argument("-v", "--verbose", action="store_true", default=default,
                         help="log every stage")
  verbosity.add_argument("-q", "--quiet", action="store_true", default=default,
                         help="only log warnings and errors")


def make_parser():
  usage = "%(prog)s [verb] [KEY=VALUE ...] [options]"
  desc = "Build script for the UEFI app (the verb defaults to build)"
  epilog = "settings: " + ", ".join(f"{k} (default: {v})" for k, v in config.DEFAULTS.items())

  parser = argparse.ArgumentParser(prog="efiboot", usage=usage, description=desc, epilog=epilog)
  add_verbosity(parser)

  subparsers = parser.add_subparsers(dest="verb")
  build_parser = subparsers.add_parser("build", help="compile and assemble the ESP")
  run_parser = subparsers.add_parser("run", help="build, then boot the ESP in QEMU")
  # After add_subparsers, so the subparsers action picks up the default verb.
  parser.set_defaults(verb="build", settings=[], startup_script=False)

  for sub in (build_parser, run_parser):
    sub.add_argument("settings", nargs="*", metavar="KEY=VALUE",
                     help="override name, mode, target or accel")
    sub.add_argument("--startup-script", action="store_true",
                     help="also write startup.nsh for the UEFI Shell")
    # Suppressed so `-v build` is not reset by the subcommand's own default.
    add_verbosity(sub, default=argparse.SUPPRESS)

  return parser


def main(argv=None, environ=None, cwd=None, run=None):
  "Run user-requested actions and return the process exit code."

  opts = make_parser().parse_args(argv)

  if opts.verbose:
    setup_logging(logging.DEBUG)
  elif opts.quiet:
    setup_logging(logging.WARNING)
  else:
    setup_logging()

  # Capture the implicit inputs once; everything below gets them explicitly.
  environ = dict(os.environ if environ is None else environ)
  cwd = os.getcwd() if cwd is None else cwd

  try:
    pipeline = Pipeline(config.overrides_from(environ, opts.settings), cwd,
                        run=run or runner.run, environ=environ,
                        startup_script=opts.startup_script)

    if opts.verb == "build":
      boot_file = pipeline.build()
      LOG.info("ESP ready: %s", boot_file)
      return 0

    status = pipeline.run()
    LOG.debug("emulator exited with status %d", status)
    return status
  except PipelineError as exc:
    LOG.error("%s", exc)
    return exc.exit_code
  except KeyboardInterrupt:
    LOG.warning("interrupted")
    return EXIT_INTERRUPTED
