import pytest

from efiboot import LaunchFailure, Stage, resolve
from efiboot.qemu import launch, qemu_command

from conftest import FakeRunner


def test_default_command(cfg, layout):
  cmd = qemu_command(layout, cfg)

  assert cmd == [
    "qemu-system-x86_64",
    "-machine", "accel=hvf",
    "-serial", "stdio",
    "-L", ".",
    "--bios", "OVMF.fd",
    "-drive", f"format=raw,file=fat:rw:{layout.esp_dir}",
    "-m", "128M",
    "-net", "none",
    "-vga", "std",
  ]


def test_single_disk_no_network(cfg, layout):
  cmd = qemu_command(layout, cfg)

  drives = [cmd[i + 1] for i, arg in enumerate(cmd) if arg == "-drive"]
  assert drives == [f"format=raw,file=fat:rw:{layout.esp_dir}"]
  assert cmd[cmd.index("-net") + 1] == "none"
  assert "-netdev" not in cmd and "-nic" not in cmd
  assert cmd[cmd.index("-m") + 1] == "128M"


def test_accel_is_passed_verbatim(layout):
  cmd = qemu_command(layout, resolve({"accel": "kvm:tcg"}))

  assert cmd[cmd.index("-machine") + 1] == "accel=kvm:tcg"


def test_launch_runs_in_root(cfg, layout):
  run = FakeRunner()

  assert launch(layout, cfg, run=run) == 0
  assert run.commands == [qemu_command(layout, cfg)]
  assert run.calls[0]["cwd"] == layout.root


def test_exit_status_is_passed_through(cfg, layout):
  assert launch(layout, cfg, run=FakeRunner(returncodes=[3])) == 3


def test_killed_by_signal(cfg, layout):
  with pytest.raises(LaunchFailure, match="signal 15") as info:
    launch(layout, cfg, run=FakeRunner(returncodes=[-15]))

  assert info.value.stage is Stage.LAUNCHING


def test_emulator_missing(cfg, layout):
  def run(cmd, cwd=None, env=None):
    raise FileNotFoundError(2, "No such file or directory", cmd[0])

  with pytest.raises(LaunchFailure, match="could not start qemu-system-x86_64") as info:
    launch(layout, cfg, run=run)

  assert info.value.exit_code == 69
