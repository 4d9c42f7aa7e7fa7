"Boot the ESP tree in QEMU."

import logging

from . import runner as default_runner
from .errors import LaunchFailure

LOG = logging.getLogger(__name__)

QEMU = "qemu-system-x86_64"
FIRMWARE = "OVMF.fd"
MEMORY = "128M"


def qemu_command(paths, cfg):
  "Arguments for booting `paths.esp_dir` with the acceleration in `cfg`."

  qemu_flags = [
    # Hardware acceleration backend, e.g. hvf, kvm or tcg.
    "-machine", f"accel={cfg.accel}",

    # Connect the serial port to the terminal.
    "-serial", "stdio",

    # Look for firmware in the working directory and boot OVMF from it.
    "-L", ".",
    "--bios", FIRMWARE,

    # Mount the ESP directory as a FAT partition.
    "-drive", f"format=raw,file=fat:rw:{paths.esp_dir}",

    # Allocate some memory.
    "-m", MEMORY,

    # No network device.
    "-net", "none",

    # Use a standard VGA for graphics.
    "-vga", "std",
  ]

  return [QEMU] + qemu_flags


def launch(paths, cfg, run=default_runner.run):
  "Run QEMU until it exits and return its exit status unmodified."

  cmd = qemu_command(paths, cfg)

  try:
    result = run(cmd, cwd=paths.root)
  except OSError as exc:
    raise LaunchFailure(f"could not start {QEMU}: {exc}") from exc

  if result.returncode < 0:
    raise LaunchFailure(f"{QEMU} was killed by signal {-result.returncode}")
  if result.returncode != 0:
    LOG.warning("%s exited with status %d", QEMU, result.returncode)

  return result.returncode
