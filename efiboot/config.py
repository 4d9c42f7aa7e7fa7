"Resolve the build parameters from defaults and overrides."

import enum
from dataclasses import dataclass

from .errors import ConfigError


class BuildMode(enum.Enum):
  DEBUG = "debug"
  RELEASE = "release"

  def __str__(self):
    return self.value


DEFAULTS = {
  "name": "stickboy",
  "mode": "release",
  "target": "x86_64-unknown-uefi",
  "accel": "hvf",
}

KEYS = tuple(DEFAULTS)


@dataclass(frozen=True)
class ResolvedConfig:
  name: str
  mode: BuildMode
  target: str
  accel: str


def resolve(overrides=None):
  """Build a ResolvedConfig from DEFAULTS and the given overrides.

  Keys other than those in DEFAULTS are ignored, so a whole environment
  mapping can be passed in. Values are otherwise taken verbatim: a bad
  target or accel is left for cargo or QEMU to reject. `mode` is the one
  exception and must name a BuildMode, since it picks both the toolchain
  profile and the output directory.
  """

  overrides = overrides or {}
  values = {}

  for key, default in DEFAULTS.items():
    value = overrides.get(key, default)
    if not value:
      raise ConfigError(f"'{key}' must not be empty")
    values[key] = value

  try:
    values["mode"] = BuildMode(values["mode"])
  except ValueError:
    choices = ", ".join(m.value for m in BuildMode)
    raise ConfigError(
      f"unknown mode '{values['mode']}' (expected one of: {choices})") from None

  return ResolvedConfig(**values)


def parse_assignment(text):
  "Split a command-line `KEY=VALUE` assignment."

  key, sep, value = text.partition("=")
  if not sep:
    raise ConfigError(f"expected KEY=VALUE, got '{text}'")
  if key not in KEYS:
    raise ConfigError(f"unknown setting '{key}' (expected one of: {', '.join(KEYS)})")
  return key, value


def overrides_from(environ, assignments=()):
  "Merge environment variables and command-line assignments, the latter winning."

  overrides = {key: environ[key] for key in KEYS if key in environ}
  overrides.update(parse_assignment(a) for a in assignments)
  return overrides
