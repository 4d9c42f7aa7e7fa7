"Filesystem layout of the build output and the EFI System Partition."

from dataclasses import dataclass
from pathlib import Path

# Fixed by UEFI for removable media on x86-64; not derived from the app name.
BOOT_FILE_NAME = "BootX64.efi"


@dataclass(frozen=True)
class PathSet:
  root: Path
  build_dir: Path
  esp_dir: Path
  efi_boot_dir: Path

  def artifact(self, cfg):
    "Where the toolchain leaves the compiled application."
    return self.build_dir / f"{cfg.name}.efi"

  @property
  def boot_file(self):
    return self.efi_boot_dir / BOOT_FILE_NAME


def derive(cfg, cwd):
  "Compute the output locations for `cfg`, rooted at `cwd`."

  root = Path(cwd).absolute()
  build_dir = root / "target" / cfg.target / str(cfg.mode)
  esp_dir = build_dir / "esp"

  return PathSet(
    root=root,
    build_dir=build_dir,
    esp_dir=esp_dir,
    efi_boot_dir=esp_dir / "EFI" / "Boot")
