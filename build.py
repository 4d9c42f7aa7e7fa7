#!/usr/bin/env python3

# Build the UEFI application into target/<target>/<mode>/esp and boot it.
#
#   ./build.py build
#   ./build.py run name=stickboy mode=release accel=kvm

import sys

from efiboot.cli import main

if __name__ == '__main__':
  sys.exit(main(sys.argv[1:]))
