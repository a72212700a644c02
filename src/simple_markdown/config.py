"""User configuration: load and validate config.toml."""

from __future__ import annotations

import os
import re
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from simple_markdown.inline import InlineRule, Link

DEFAULT_FONT_SCALE = 1.0


class ConfigError(Exception):
    """Raised when config.toml is malformed or missing required fields."""


@dataclass
class UserRule:
    """A user-defined inline link rule from config.toml."""

    name: str
    pattern: str
    url: str  # str.format template, {0} is the whole match, {1}.. the groups
    label: str = "{0}"
    literal: bool = False  # match pattern as a plain substring

    def to_inline_rule(self) -> InlineRule:
        """Compile into an InlineRule whose builder returns a Link.

        Raises ConfigError if the pattern is invalid or matches the empty
        string, or if a template is invalid.
        """
        try:
            regex = re.compile(re.escape(self.pattern) if self.literal else self.pattern)
        except re.error as e:
            msg = f"Rule '{self.name}' has an invalid pattern: {e}"
            raise ConfigError(msg) from e

        if regex.fullmatch(""):
            msg = f"Rule '{self.name}' has a pattern that matches the empty string"
            raise ConfigError(msg)

        # Format against placeholder groups so bad templates fail at load time
        dummy = [""] * (regex.groups + 1)
        for template in (self.url, self.label):
            try:
                template.format(*dummy)
            except (IndexError, KeyError, ValueError) as e:
                msg = f"Rule '{self.name}' has an invalid template {template!r}: {e}"
                raise ConfigError(msg) from e

        url, label = self.url, self.label

        def build(match: re.Match[str], font_scale: float) -> Link:
            groups = [match.group(0), *(g or "" for g in match.groups())]
            return Link(
                label=label.format(*groups), url=url.format(*groups), font_scale=font_scale
            )

        return InlineRule(regex, build, name=self.name)


@dataclass
class Config:
    """Settings loaded from config.toml."""

    rules: list[UserRule] = field(default_factory=list)
    font_scale: float = DEFAULT_FONT_SCALE

    def inline_rules(self) -> list[InlineRule]:
        return [rule.to_inline_rule() for rule in self.rules]


def get_config_path() -> Path:
    """Return the path to config.toml, respecting XDG_CONFIG_HOME."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else Path.home() / ".config"
    return base / "simple-markdown" / "config.toml"


def _font_scale(value: object, path: Path) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        msg = f"font_scale in {path} must be a positive number, got {value!r}"
        raise ConfigError(msg)
    return float(value)


def load_config(path: Path) -> Config:
    """Load and validate settings from a TOML file.

    Returns the defaults if the file does not exist.
    Raises ConfigError on parse errors, missing or wrongly typed fields,
    or rules that do not compile.
    """
    if not path.exists():
        return Config()

    try:
        data = tomllib.loads(path.read_text())
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {path}: {e}"
        raise ConfigError(msg) from e

    font_scale = _font_scale(data.get("font_scale", DEFAULT_FONT_SCALE), path)

    raw_rules = data.get("rules", [])
    if not isinstance(raw_rules, list):
        msg = f"rules in {path} must be an array of tables"
        raise ConfigError(msg)

    rules: list[UserRule] = []
    for i, entry in enumerate(raw_rules):
        if not isinstance(entry, dict):
            msg = f"Rule {i} in {path} must be a table, got {entry!r}"
            raise ConfigError(msg)
        for key in ("name", "pattern", "url"):
            if key not in entry:
                msg = f"Rule {i} in {path} is missing required field '{key}'"
                raise ConfigError(msg)
        for key in ("name", "pattern", "url", "label"):
            if key in entry and not isinstance(entry[key], str):
                msg = f"Rule {i} in {path}: field '{key}' must be a string"
                raise ConfigError(msg)
        if not isinstance(entry.get("literal", False), bool):
            msg = f"Rule {i} in {path}: field 'literal' must be a boolean"
            raise ConfigError(msg)
        rule = UserRule(
            name=entry["name"],
            pattern=entry["pattern"],
            url=entry["url"],
            label=entry.get("label", "{0}"),
            literal=entry.get("literal", False),
        )
        # Validate eagerly so a bad rule is reported before rendering
        rule.to_inline_rule()
        rules.append(rule)
    return Config(rules=rules, font_scale=font_scale)
