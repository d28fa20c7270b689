"""Reporters: render filter configuration for humans."""

from tagfilter.application.reporters.console import ConsoleConfig, RegistryConsoleReporter

__all__ = ["ConsoleConfig", "RegistryConsoleReporter"]
