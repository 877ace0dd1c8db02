"""
Configuration for the schemadoc helpers.

Defines HelperSettings, a frozen dataclass carrying the few knobs the helpers
honor. Defaults are sourced from schemadoc.core.constants (the single source of
truth).

Source of truth
- schemadoc.core.constants.NULL_LITERAL, UNDEFINED_LITERAL, RESERVED_EXTENSION_PREFIXES

Notes
- Helpers never read the environment themselves; callers pass settings explicitly
  (or rely on HelperSettings() defaults).
- Precedence when loading: env > TOML > defaults.
- The reserved extension prefixes are always hidden; `extra_hidden_prefixes` only adds to them.
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from schemadoc.core.constants import NULL_LITERAL as CORE_NULL_LITERAL
from schemadoc.core.constants import RESERVED_EXTENSION_PREFIXES
from schemadoc.core.constants import UNDEFINED_LITERAL as CORE_UNDEFINED_LITERAL
from schemadoc.core.errors import ConfigError

logger = logging.getLogger(__name__)

__all__ = ["HelperSettings"]


@dataclass(frozen=True)
class HelperSettings:
    """
    Runtime settings for the schemadoc helpers.

    Attributes:
        null_literal (str): Text used for a JSON null example in json_to_schema.
        undefined_literal (str): Text used when no example value was given.
        extra_hidden_prefixes (tuple[str, ...]): Extension prefixes hidden by
            get_custom_extensions in addition to the reserved ones.

    Examples:
        >>> from schemadoc.config import HelperSettings
        >>> HelperSettings(null_literal="null").hidden_prefixes()
        ('x-parser-', 'x-schema-private-')
    """

    null_literal: str = CORE_NULL_LITERAL
    undefined_literal: str = CORE_UNDEFINED_LITERAL
    extra_hidden_prefixes: tuple[str, ...] = ()

    def hidden_prefixes(self) -> tuple[str, ...]:
        """Reserved prefixes followed by the configured extras, without duplicates."""
        ordered: list[str] = []
        for prefix in RESERVED_EXTENSION_PREFIXES + self.extra_hidden_prefixes:
            if prefix and prefix not in ordered:
                ordered.append(prefix)
        return tuple(ordered)

    # Configuration loaders (env/TOML) with precedence: env > TOML > defaults.

    @classmethod
    def _apply_mapping(cls, base: HelperSettings, cfg: dict[str, Any] | None) -> HelperSettings:
        """Apply a loose config mapping onto HelperSettings, returning a new instance."""
        if not isinstance(cfg, dict):
            return base

        s = base

        if "null_literal" in cfg and isinstance(cfg["null_literal"], str):
            s = replace(s, null_literal=cfg["null_literal"])

        if "undefined_literal" in cfg and isinstance(cfg["undefined_literal"], str):
            s = replace(s, undefined_literal=cfg["undefined_literal"])

        if "extra_hidden_prefixes" in cfg:
            raw = cfg["extra_hidden_prefixes"]
            if isinstance(raw, str):
                raw = raw.split(",")
            if isinstance(raw, (list, tuple)):
                prefixes = tuple(p.strip() for p in raw if isinstance(p, str) and p.strip())
                s = replace(s, extra_hidden_prefixes=prefixes)
            else:
                logger.debug("ignoring extra_hidden_prefixes of type %s", type(raw).__name__)

        return s

    @classmethod
    def from_env(
        cls, base: HelperSettings | None = None, prefix: str = "SCHEMADOC_"
    ) -> HelperSettings:
        """
        Build HelperSettings from environment variables. Precedence is env > base (if provided) > defaults.

        Recognized variables:
            - SCHEMADOC_NULL_LITERAL
            - SCHEMADOC_UNDEFINED_LITERAL (set-but-empty is honored)
            - SCHEMADOC_EXTRA_HIDDEN_PREFIXES (comma-separated)
        """
        s = base or cls()

        def get(name: str) -> str | None:
            return os.getenv(prefix + name)

        mapping: dict[str, Any] = {}
        v = get("NULL_LITERAL")
        if v:
            mapping["null_literal"] = v
        v = get("UNDEFINED_LITERAL")
        if v is not None:
            mapping["undefined_literal"] = v
        v = get("EXTRA_HIDDEN_PREFIXES")
        if v:
            mapping["extra_hidden_prefixes"] = v

        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> HelperSettings:
        """
        Build HelperSettings from a TOML file.

        Search order when `path` is None:
            1) ./schemadoc.toml (with either a [helpers] table or direct keys)
            2) ./pyproject.toml under [tool.schemadoc]

        Returns defaults if no file is found.

        Raises:
            ConfigError: If an explicit `path` does not exist or is not valid TOML.
        """
        s = cls()

        cand: list[Path] = []
        if path is not None:
            explicit = Path(path)
            if not explicit.exists():
                raise ConfigError(f"settings file not found: {explicit}")
            cand.append(explicit)
        else:
            cand.append(Path.cwd() / "schemadoc.toml")
            cand.append(Path.cwd() / "pyproject.toml")

        cfg: dict[str, Any] | None = None
        for p in cand:
            if not p.exists():
                continue
            try:
                with p.open("rb") as fh:
                    data = tomllib.load(fh)
            except tomllib.TOMLDecodeError as e:
                if path is not None:
                    raise ConfigError(f"invalid TOML in {p}: {e}") from e
                logger.debug("skipping unreadable settings file %s: %s", p, e)
                continue
            if p.name == "pyproject.toml":
                tool = data.get("tool", {})
                cfg = tool.get("schemadoc") if isinstance(tool, dict) else None
            elif isinstance(data.get("helpers"), dict):
                cfg = data["helpers"]
            else:
                cfg = data
            if cfg:
                break

        return cls._apply_mapping(s, cfg)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> HelperSettings:
        """
        Load HelperSettings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search defaults (schemadoc.toml, pyproject.toml).

        Returns:
            HelperSettings
        """
        s = cls.from_toml(path)
        s = cls.from_env(base=s)
        return s
