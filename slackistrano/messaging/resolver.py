"""Resolve the messaging provider for a deployment run."""

import importlib
import logging
from typing import Optional

from slackistrano.messaging.base import MessagingProvider
from slackistrano.messaging.default import Default
from slackistrano.messaging.null import Null

logger = logging.getLogger(__name__)


def resolve_messaging(config: Optional[dict], env=None) -> MessagingProvider:
    """
    Build the provider described by the ``slackistrano`` settings mapping.

    Priority:
      1. No config (None / False) -> Null, notifications off
      2. ``klass`` entry, a class or import path -> that class
      3. Default
    """
    if config is None or config is False:
        return Null(env=env)

    options = dict(config)
    klass = options.pop("klass", None) or Default
    if isinstance(klass, str):
        klass = _import_class(klass)
    elif not isinstance(klass, type) or not issubclass(klass, MessagingProvider):
        raise ValueError(f"Unknown messaging provider class: {klass!r}")

    logger.debug("Using messaging provider %s", klass.__name__)
    return klass.from_config(options, env=env)


def _import_class(path: str) -> type:
    """Import ``package.module:Class`` or ``package.module.Class``."""
    if ":" in path:
        module_name, _, attr = path.partition(":")
    else:
        module_name, _, attr = path.rpartition(".")
    if not module_name or not attr:
        raise ValueError(f"Invalid messaging class path: {path}")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ValueError(f"Cannot import messaging module {module_name}: {e}") from e

    klass = getattr(module, attr, None)
    if not isinstance(klass, type) or not issubclass(klass, MessagingProvider):
        raise ValueError(f"Unknown messaging provider class: {path}")
    return klass
