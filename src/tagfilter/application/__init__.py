"""Application layer: filtering service and reporters."""

from tagfilter.application.reporters import ConsoleConfig, RegistryConsoleReporter
from tagfilter.application.services import TaggedFilterer

__all__ = ["ConsoleConfig", "RegistryConsoleReporter", "TaggedFilterer"]
