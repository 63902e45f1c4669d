"""Host deployment tool integration: environment protocol and lifecycle hooks."""

import logging
import time
from collections import defaultdict
from functools import partial
from typing import Any, Callable, Optional, Protocol

from slackistrano.dispatcher import Notifier

logger = logging.getLogger(__name__)

# (when, host task, notification event)
LIFECYCLE_HOOKS = [
    ("before", "deploy:starting", "starting"),
    ("before", "deploy:updating", "updating"),
    ("before", "deploy:reverting", "reverting"),
    ("after", "deploy:finishing", "updated"),
    ("after", "deploy:finishing_rollback", "reverted"),
    ("after", "deploy:failed", "failed"),
]

TEST_SEQUENCE = ["updating", "updated", "reverting", "reverted", "failed"]


class HostEnv(Protocol):
    """What the host deployment tool must provide."""

    dry_run: bool

    def fetch(self, key: str, default: Any = None) -> Any:
        ...

    def set(self, key: str, value: Any) -> None:
        ...

    def hook(self, when: str, task: str, callback: Callable[[], None]) -> None:
        ...


class DeployEnv:
    """
    Dict-backed host environment.

    Used for standalone runs and tests; a real host adapts its own config
    store and task registry to the same methods.
    """

    def __init__(self, variables: Optional[dict] = None, dry_run: bool = False):
        self.variables = dict(variables or {})
        self.dry_run = dry_run
        self.hooks: dict[tuple[str, str], list[Callable[[], None]]] = defaultdict(list)

    def fetch(self, key: str, default: Any = None) -> Any:
        return self.variables.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.variables[key] = value

    def hook(self, when: str, task: str, callback: Callable[[], None]) -> None:
        if when not in ("before", "after"):
            raise ValueError(f"Unknown hook position: {when}")
        self.hooks[(when, task)].append(callback)

    def invoke(self, task: str, action: Optional[Callable[[], None]] = None) -> None:
        """Run ``task`` surrounded by its before/after hooks."""
        for callback in self.hooks[("before", task)]:
            callback()
        if action is not None:
            action()
        for callback in self.hooks[("after", task)]:
            callback()


def notify(env: HostEnv, event: str, **kwargs) -> None:
    """Send the notification for one lifecycle event."""
    if event == "starting":
        env.set("slackistrano_start_time", time.time())
    Notifier(env, **kwargs).process(event)


def register(host: HostEnv, **kwargs) -> None:
    """Attach a notification to every deployment lifecycle point."""
    for when, task, event in LIFECYCLE_HOOKS:
        host.hook(when, task, partial(notify, host, event, **kwargs))
    logger.debug("Registered %d slackistrano hooks", len(LIFECYCLE_HOOKS))


def send_test_messages(env: HostEnv, **kwargs) -> None:
    """Post every message once to check the Slack integration."""
    notifier = Notifier(env, **kwargs)
    for event in TEST_SEQUENCE:
        notifier.process(event)
