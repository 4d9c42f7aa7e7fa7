import subprocess as sp

import pytest

from efiboot import derive, resolve


class FakeRunner:
  "Records commands instead of running them."

  def __init__(self, returncodes=None, on_run=None):
    self.calls = []
    self.returncodes = list(returncodes or [])
    self.on_run = on_run

  def __call__(self, cmd, cwd=None, env=None):
    cmd = [str(arg) for arg in cmd]
    self.calls.append({"cmd": cmd, "cwd": cwd, "env": env})
    if self.on_run:
      self.on_run(cmd)
    code = self.returncodes.pop(0) if self.returncodes else 0
    return sp.CompletedProcess(cmd, code)

  @property
  def commands(self):
    return [call["cmd"] for call in self.calls]


def cargo_writes(path):
  "An on_run hook that drops a fake .efi at `path` when cargo runs."

  def hook(cmd):
    if cmd[0] == "cargo":
      path.parent.mkdir(parents=True, exist_ok=True)
      path.write_bytes(b"MZ fake efi image")

  return hook


@pytest.fixture
def cfg():
  return resolve({})


@pytest.fixture
def layout(cfg, tmp_path):
  return derive(cfg, tmp_path)


@pytest.fixture
def artifact(cfg, layout):
  path = layout.artifact(cfg)
  path.parent.mkdir(parents=True, exist_ok=True)
  path.write_bytes(b"MZ\x90\x00 stickboy")
  return path
