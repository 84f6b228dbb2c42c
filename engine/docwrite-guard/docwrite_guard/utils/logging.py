# docwrite_guard/utils/logging.py
# Purpose: Namespaced loggers and the write-target adapter used by the engine entrypoints.
# Notes: Host applications own handlers, formats and levels. Document contents are never logged.

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, MutableMapping

LOGGER_NAMESPACE = "docwrite_guard"


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Return a logger under the docwrite_guard namespace. Does NOT configure handlers/levels.
    """
    if not name or name == LOGGER_NAMESPACE:
        return logging.getLogger(LOGGER_NAMESPACE)
    if name.startswith(LOGGER_NAMESPACE + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")


@dataclass(frozen=True)
class WriteTarget:
    """The write a log line belongs to."""

    path: str
    operation: str
    strict: bool = False

    def prefix(self) -> str:
        out = f"path={self.path} op={self.operation}"
        return out + " strict" if self.strict else out


class WriteLogAdapter(logging.LoggerAdapter):
    """
    Prefix messages with the write target and attach it to each record as ``write_target``,
    so host filters can route by path without parsing messages.
    """

    def __init__(self, logger: logging.Logger | logging.LoggerAdapter, target: WriteTarget):
        super().__init__(logger, {"write_target": target})
        self.target = target

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> tuple[Any, MutableMapping[str, Any]]:
        kwargs["extra"] = {**(kwargs.get("extra") or {}), "write_target": self.target}
        return f"{self.target.prefix()} | {msg}", kwargs


def write_logger(
    logger: logging.Logger | logging.LoggerAdapter,
    path: str,
    operation: str,
    *,
    strict: bool = False,
) -> WriteLogAdapter:
    return WriteLogAdapter(logger, WriteTarget(path=path, operation=operation, strict=strict))
