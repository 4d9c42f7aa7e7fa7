"Assemble the EFI System Partition tree."

import logging
import shutil

from .errors import IOFailure, MissingArtifact
from .paths import BOOT_FILE_NAME

LOG = logging.getLogger(__name__)

STARTUP_SCRIPT = "startup.nsh"


def reason(exc):
  return exc.strerror or str(exc)


def assemble(paths, cfg, startup_script=False):
  """Copy the built application to the ESP's boot path.

  Safe to re-run: existing directories are kept and the boot file is
  overwritten. Other files under the ESP are left alone. Returns the path
  of the boot file.
  """

  built_file = paths.artifact(cfg)
  output_file = paths.boot_file

  # Create the boot folder.
  try:
    paths.efi_boot_dir.mkdir(parents=True, exist_ok=True)
  except OSError as exc:
    raise IOFailure(f"could not create {paths.efi_boot_dir}: {reason(exc)}") from exc

  if not built_file.is_file():
    raise MissingArtifact(built_file)

  # Copy the UEFI application into place.
  try:
    shutil.copy2(built_file, output_file)
  except OSError as exc:
    raise IOFailure(f"could not copy {built_file} to {output_file}: {reason(exc)}") from exc
  LOG.info("copied %s -> %s", built_file, output_file)

  if startup_script:
    write_startup_script(paths)

  return output_file


def write_startup_script(paths):
  "Make the UEFI Shell load the application automatically."

  script = paths.esp_dir / STARTUP_SCRIPT
  try:
    script.write_text("\\EFI\\Boot\\" + BOOT_FILE_NAME + "\n")
  except OSError as exc:
    raise IOFailure(f"could not write {script}: {reason(exc)}") from exc
  LOG.debug("wrote %s", script)
  return script
