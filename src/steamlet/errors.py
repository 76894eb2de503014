from __future__ import annotations


class EnvironmentFailure(RuntimeError):
    """The machine is not in a state we can work with (data dir, files, processes)."""
