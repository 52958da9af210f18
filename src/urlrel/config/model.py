# topmark:header:start
#
#   project      : UrlRel
#   file         : model.py
#   file_relpath : src/urlrel/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model for UrlRel.

The configuration is built in layers on a mutable builder (`MutableConfig`)
and then frozen into an immutable runtime snapshot (`Config`).

Merge order (lowest → highest precedence):
    1) Built-in defaults
    2) ``[tool.urlrel]`` in ``pyproject.toml`` in the working directory
    3) ``urlrel.toml`` in the working directory
    4) Extra config files passed explicitly via ``--config`` (in the order provided)
    5) CLI overrides
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from urlrel.config.keys import Toml
from urlrel.config.loaders import (
    extract_tool_section,
    get_string_value_or_none,
    load_defaults_dict,
    load_toml_dict,
    to_toml,
)
from urlrel.config.logging import get_logger
from urlrel.formats import OutputFormat

if TYPE_CHECKING:
    from urlrel.config.loaders import TomlTable
    from urlrel.config.logging import UrlrelLogger

# Generic mapping accepted by `MutableConfig.apply_cli_args` (CLI namespaces and plain dicts).
ArgsLike = Mapping[str, Any]

logger: UrlrelLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for UrlRel.

    Attributes:
        base_url (str | None): Base URL used when none is given on the command line.
        output_format (OutputFormat): Output format of the ``relative`` command.
        config_files (tuple[Path, ...]): Config files that contributed to this snapshot.
    """

    base_url: str | None = None
    output_format: OutputFormat = OutputFormat.TEXT
    config_files: tuple[Path, ...] = ()

    def to_toml_dict(self) -> TomlTable:
        """Return the configuration as a TOML-compatible dict (unset keys omitted)."""
        out: TomlTable = {}
        if self.base_url is not None:
            out[Toml.KEY_BASE_URL] = self.base_url
        out[Toml.KEY_OUTPUT_FORMAT] = self.output_format.value
        return out

    def to_toml(self) -> str:
        """Render the configuration as TOML text."""
        return to_toml(self.to_toml_dict())


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Attributes:
        base_url (str | None): Base URL; None = unset.
        output_format (OutputFormat | None): Output format; None = inherit.
        config_files (list[Path]): Config files merged into this draft.
    """

    base_url: str | None = None
    output_format: OutputFormat | None = None
    config_files: list[Path] = field(default_factory=list)

    def freeze(self) -> Config:
        """Freeze this mutable builder into an immutable Config."""
        return Config(
            base_url=self.base_url,
            output_format=self.output_format or OutputFormat.TEXT,
            config_files=tuple(self.config_files),
        )

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a draft initialized from the runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict())

    @classmethod
    def from_toml_dict(cls, data: TomlTable) -> MutableConfig:
        """Build a draft from a UrlRel TOML table.

        Unknown keys and values of the wrong type are logged and ignored.

        Args:
            data (TomlTable): The UrlRel table (top level of ``urlrel.toml`` or
                ``[tool.urlrel]``).

        Returns:
            MutableConfig: The draft holding the recognized values.
        """
        known: set[str] = {Toml.KEY_BASE_URL, Toml.KEY_OUTPUT_FORMAT}
        for key in data:
            if key not in known:
                logger.warning("Ignoring unknown config key '%s'", key)

        draft = cls(base_url=get_string_value_or_none(data, Toml.KEY_BASE_URL))

        raw_format: str | None = get_string_value_or_none(data, Toml.KEY_OUTPUT_FORMAT)
        if raw_format is not None:
            draft.output_format = OutputFormat.parse(raw_format)
            if draft.output_format is None:
                logger.warning(
                    "Ignoring invalid %s '%s' (expected one of: %s)",
                    Toml.KEY_OUTPUT_FORMAT,
                    raw_format,
                    ", ".join(f.value for f in OutputFormat),
                )
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``urlrel.toml`` and ``pyproject.toml`` files, extracting the
        ``[tool.urlrel]`` section from the latter.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The draft if successful; None if ``pyproject.toml``
                has no ``[tool.urlrel]`` section.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        section: TomlTable | None = extract_tool_section(load_toml_dict(path), path)
        if section is None:
            return None
        draft: MutableConfig = cls.from_toml_dict(section)
        draft.config_files = [path]
        logger.debug("Generated MutableConfig: %s", draft)
        return draft

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files in ``start``: ``pyproject.toml`` first, then ``urlrel.toml``."""
        found: list[Path] = []
        for name in (Toml.PYPROJECT_FILE_NAME, Toml.CONFIG_FILE_NAME):
            candidate: Path = start / name
            if candidate.is_file():
                found.append(candidate)
        logger.trace("Discovered config files in %s: %s", start, found)
        return found

    @classmethod
    def load_merged(
        cls,
        *,
        anchor: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Discover and merge configuration layers into a draft `MutableConfig`.

        Args:
            anchor (Path | None): Directory searched for ``pyproject.toml`` and
                ``urlrel.toml``; the working directory if None.
            extra_config_files (Iterable[Path] | None): Explicit additional config
                files merged **after** discovery (their given order).
            no_config (bool): If True, skip discovery (extra files still apply).

        Returns:
            MutableConfig: A draft ready to be frozen or further edited.
        """
        draft: MutableConfig = cls.from_defaults()

        if not no_config:
            for cfg_path in cls.discover_local_config_files(anchor or Path.cwd()):
                mc: MutableConfig | None = cls.from_toml_file(cfg_path)
                if mc is not None:
                    draft = draft.merge_with(mc)

        for extra in extra_config_files or ():
            mc = cls.from_toml_file(Path(extra))
            if mc is not None:
                draft = draft.merge_with(mc)

        return draft

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft."""
        return MutableConfig(
            base_url=other.base_url if other.base_url is not None else self.base_url,
            output_format=other.output_format
            if other.output_format is not None
            else self.output_format,
            config_files=self.config_files + other.config_files,
        )

    def apply_cli_args(self, args: ArgsLike) -> MutableConfig:
        """Apply CLI overrides (``base_url``, ``output_format``) in place.

        Args:
            args (ArgsLike): Parsed CLI values; None values leave the draft unchanged.

        Returns:
            MutableConfig: This draft, for chaining.
        """
        base_url: str | None = args.get("base_url")
        if base_url is not None:
            self.base_url = base_url
        output_format: OutputFormat | None = args.get("output_format")
        if output_format is not None:
            self.output_format = output_format
        return self
