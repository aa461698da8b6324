"""Module entrypoint for running sysctl_conf as ``python -m sysctl_conf``."""

from __future__ import annotations

from sysctl_conf.cli import main


if __name__ == "__main__":
    main()
