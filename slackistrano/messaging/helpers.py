"""Deployment facts used when building messages."""

import os
import time
from typing import Optional


class MessageHelpers:
    """Mixin reading deployment details from the host env and process environment."""

    env = None

    def _fetch(self, key: str, default=None):
        if self.env is None:
            return default
        return self.env.fetch(key, default)

    @property
    def deployer(self) -> Optional[str]:
        return os.environ.get("USER") or os.environ.get("USERNAME")

    @property
    def branch(self):
        return self._fetch("branch")

    @property
    def application(self):
        return self._fetch("application")

    def stage(self, default: str = "an unknown stage"):
        return self._fetch("stage", default)

    @property
    def deploying(self) -> bool:
        return bool(self._fetch("deploying", False))

    @property
    def rollback(self) -> bool:
        return not self.deploying

    @property
    def elapsed_time(self) -> Optional[str]:
        """Time since the ``starting`` hook fired, as MM:SS."""
        start = self._fetch("slackistrano_start_time")
        if start is None:
            return None
        minutes, seconds = divmod(int(time.time() - start), 60)
        return "%02d:%02d" % (minutes, seconds)
