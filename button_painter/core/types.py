"""Shared types for button-painter: rule results, Rule, Preset, Command, Report."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Union

from button_painter.core.theme import Theme


@dataclass(frozen=True)
class Properties:
    """A matched rule expressed as CSS property -> value pairs."""

    properties: dict[str, str]


@dataclass(frozen=True)
class RawBlock:
    """A matched rule expressed as literal CSS (needed for :hover/:focus)."""

    css: str


RuleResult = Union[Properties, RawBlock]


@dataclass(frozen=True)
class RuleContext:
    """What the host hands a rule handler besides the regex match."""

    theme: Theme
    raw_selector: str  # unescaped class name


Handler = Callable[[re.Match, RuleContext], Union[RuleResult, None]]


@dataclass(frozen=True)
class Rule:
    """One (pattern, handler, metadata) entry of a preset."""

    pattern: re.Pattern
    handler: Handler
    meta: dict[str, Any] = field(default_factory=dict)

    @property
    def autocomplete(self) -> list[str]:
        return list(self.meta.get('autocomplete', []))


@dataclass(frozen=True)
class Preset:
    """A named, ordered list of rules. First match wins."""

    name: str
    rules: list[Rule] = field(default_factory=list)


class Command:
    """A self-registering CLI command.

    Usage in a command module:

        command = Command(name='css', help='Generate CSS for class names')

        @command.run
        def run(theme, candidates, args):
            ...
            return 0
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def execute(self, theme: Theme, candidates: list[str], args: Any) -> int:
        """Execute the command's run function, returning its exit status."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        return self._run_fn(theme, candidates, args) or 0


@dataclass
class Report:
    """Accumulates matched rules and misses for text/JSON output."""

    preset: str = ''
    rules: list[tuple[str, RuleResult]] = field(default_factory=list)
    unmatched: list[str] = field(default_factory=list)

    def add(self, selector: str, result: RuleResult) -> None:
        self.rules.append((selector, result))

    def record_unmatched(self, selector: str) -> None:
        self.unmatched.append(selector)
