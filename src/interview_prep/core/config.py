"""TOML loading and schema-checked merging for interview-prep settings."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, MutableMapping, Optional

__all__ = [
    "Setting",
    "TomlConfigError",
    "load_toml",
    "merge_defaults",
    "write_toml_template",
]


class TomlConfigError(RuntimeError):
    """A config file could not be read, parsed or validated."""


@dataclass(frozen=True)
class Setting:
    """Expected type of one leaf value, keyed by its dotted path."""

    kind: type
    description: str

    def accepts(self, value: Any) -> bool:
        # TOML booleans are ints to Python; only a bool setting takes them.
        if isinstance(value, bool) and self.kind is not bool:
            return False
        return isinstance(value, self.kind)


def load_toml(path: Path) -> dict[str, Any]:
    """Parse the TOML document at ``path``."""

    try:
        raw = path.read_bytes()
    except FileNotFoundError as exc:
        raise TomlConfigError(f"Config file not found: {path}") from exc
    try:
        return tomllib.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
        raise TomlConfigError(
            f"Failed to parse config TOML {path.name}: {exc}"
        ) from exc


def merge_defaults(
    base: MutableMapping[str, Any],
    override: Mapping[str, Any],
    *,
    schema: Optional[Mapping[str, Setting]] = None,
    path: str = "",
) -> None:
    """Overlay ``override`` onto ``base`` in place.

    Only keys already present in ``base`` are accepted and tables must stay
    tables. Leaves named in ``schema`` (dotted path to :class:`Setting`)
    must match its type.
    """

    settings = schema or {}
    for key, value in override.items():
        dotted = path + key
        if key not in base:
            raise TomlConfigError(f"Unknown configuration key '{dotted}'.")
        target = base[key]
        if isinstance(target, MutableMapping):
            if not isinstance(value, Mapping):
                raise TomlConfigError(
                    f"Expected table for '{dotted}', "
                    f"found {type(value).__name__}."
                )
            merge_defaults(target, value, schema=settings, path=f"{dotted}.")
            continue
        setting = settings.get(dotted)
        if setting is not None and not setting.accepts(value):
            raise TomlConfigError(f"{dotted} must be {setting.description}.")
        base[key] = value


def write_toml_template(
    path: Path,
    *,
    template: str,
    overwrite: bool = False,
    mode: int = 0o600,
) -> Path:
    """Write ``template`` to ``path``, keeping an existing file by default."""

    path.parent.mkdir(parents=True, exist_ok=True)
    try:
        with path.open("w" if overwrite else "x", encoding="utf-8") as handle:
            handle.write(template)
    except FileExistsError as exc:
        raise TomlConfigError(f"Config already exists: {path}") from exc
    path.chmod(mode)
    return path
