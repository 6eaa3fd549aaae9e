"""Exceptions raised by navalbot."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class NavalBotError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


class UnknownEntityTypeError(NavalBotError, KeyError):
    pass


class NoSpawnOptionsError(NavalBotError):
    """The entity table offers nothing to spawn as. Fatal misconfiguration."""


@dataclass
class ScenarioError(NavalBotError):
    path: str | None = None

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f"{self.path}: {self.message}"
