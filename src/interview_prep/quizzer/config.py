"""Configuration loader for the quiz and main-menu commands."""

from __future__ import annotations

import os
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Mapping, MutableMapping, Optional

from interview_prep.core import config as core_config
from interview_prep.core import workspace as workspace_mod

CONFIG_FILENAME = "interview_prep.toml"
CONFIG_ENV = "INTERVIEW_PREP_CONFIG"
ENV_PREFIX = "INTERVIEW_PREP_"
TEMPLATE_RESOURCE = "template.toml"

_DEFAULT_LOG_LEVEL = "INFO"

_SCHEMA = {
    "quiz.default_questions": core_config.Setting(int, "an integer"),
    "quiz.seed": core_config.Setting(int, "an integer"),
    "logging.level": core_config.Setting(str, "a non-empty string"),
}


class InterviewPrepConfigError(RuntimeError):
    """Raised when configuration parsing or validation fails."""


@dataclass(frozen=True)
class QuizConfig:
    """Fully resolved configuration for a quiz run."""

    default_questions: Optional[int]
    seed: Optional[int]
    log_level: str


@dataclass(frozen=True)
class ConfigOverrides:
    """CLI-sourced overrides applied on top of file/env options."""

    default_questions: Optional[int] = None
    seed: Optional[int] = None
    log_level: Optional[str] = None


@dataclass(frozen=True)
class LoadResult:
    """Resolved config plus the workspace it was loaded from."""

    config: QuizConfig
    layout: workspace_mod.WorkspaceLayout
    config_path: Optional[Path]


def load_config(
    *,
    config_path: Optional[Path] = None,
    overrides: Optional[ConfigOverrides] = None,
    env: Optional[Mapping[str, str]] = None,
    workspace_path: Optional[Path] = None,
) -> LoadResult:
    """Load configuration applying precedence CLI > env > TOML defaults."""

    overrides = overrides or ConfigOverrides()
    env_map = os.environ if env is None else env

    try:
        layout = workspace_mod.ensure_workspace(
            env=env_map, path=workspace_path
        )
    except workspace_mod.WorkspaceError as exc:
        raise InterviewPrepConfigError(str(exc)) from exc
    default_path = layout.path_for("config") / CONFIG_FILENAME

    requested = _resolve_config_path(config_path, env_map, default_path)
    options = _default_table()
    loaded_path: Optional[Path] = None

    if requested.exists():
        loaded_path = requested
        try:
            core_config.merge_defaults(
                options, core_config.load_toml(requested), schema=_SCHEMA
            )
        except core_config.TomlConfigError as exc:
            raise InterviewPrepConfigError(str(exc)) from exc
    elif config_path is not None or (env_map.get(CONFIG_ENV) or "").strip():
        raise InterviewPrepConfigError(f"Config file not found: {requested}")

    default_questions = _pick_first(
        overrides.default_questions,
        _parse_env_int(env_map, "DEFAULT_QUESTIONS"),
        options["quiz"]["default_questions"],
    )
    if default_questions is not None and default_questions < 1:
        raise InterviewPrepConfigError(
            "quiz.default_questions must be at least 1."
        )

    seed = _pick_first(
        overrides.seed,
        _parse_env_int(env_map, "SEED"),
        options["quiz"]["seed"],
    )

    log_level = _resolve_log_level(
        _pick_first(
            overrides.log_level,
            _parse_env_string(env_map, "LOG_LEVEL"),
            options["logging"]["level"],
        )
    )

    config = QuizConfig(
        default_questions=default_questions,
        seed=seed,
        log_level=log_level,
    )
    return LoadResult(config=config, layout=layout, config_path=loaded_path)


def read_template() -> str:
    """Return the packaged ``interview_prep.toml`` template text."""

    resource = resources.files(__package__).joinpath(TEMPLATE_RESOURCE)
    return resource.read_text(encoding="utf-8")


def write_template(path: Path, *, overwrite: bool = False) -> Path:
    try:
        return core_config.write_toml_template(
            path, template=read_template(), overwrite=overwrite
        )
    except core_config.TomlConfigError as exc:
        raise InterviewPrepConfigError(str(exc)) from exc


def _default_table() -> MutableMapping[str, MutableMapping[str, object]]:
    return {
        "quiz": {"default_questions": None, "seed": None},
        "logging": {"level": _DEFAULT_LOG_LEVEL},
    }


def _resolve_config_path(
    config_path: Optional[Path],
    env_map: Mapping[str, str],
    default_path: Path,
) -> Path:
    if config_path is not None:
        return config_path.expanduser()
    env_candidate = (env_map.get(CONFIG_ENV) or "").strip()
    if env_candidate:
        return Path(env_candidate).expanduser()
    return default_path


def _resolve_log_level(candidate: object) -> str:
    if not isinstance(candidate, str) or not candidate.strip():
        raise InterviewPrepConfigError(
            "logging.level must be a non-empty string."
        )
    return candidate.strip().upper()


def _parse_env_int(env_map: Mapping[str, str], key: str) -> Optional[int]:
    raw = _parse_env_string(env_map, key)
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise InterviewPrepConfigError(
            f"{ENV_PREFIX}{key} must be an integer, got '{raw}'."
        ) from exc


def _parse_env_string(env_map: Mapping[str, str], key: str) -> Optional[str]:
    raw = env_map.get(f"{ENV_PREFIX}{key}")
    if raw is None:
        return None
    value = raw.strip()
    return value or None


def _pick_first(*candidates):
    for candidate in candidates:
        if candidate is not None:
            return candidate
    return None
