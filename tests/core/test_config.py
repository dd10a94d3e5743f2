from __future__ import annotations

import pytest

from interview_prep.core import config as core_config


def test_load_toml_reads_tables(tmp_path):
    path = tmp_path / "cfg.toml"
    path.write_text("[quiz]\nseed = 3\n", encoding="utf-8")

    assert core_config.load_toml(path) == {"quiz": {"seed": 3}}


def test_load_toml_missing_and_invalid(tmp_path):
    with pytest.raises(core_config.TomlConfigError, match="not found"):
        core_config.load_toml(tmp_path / "missing.toml")

    broken = tmp_path / "broken.toml"
    broken.write_text("[quiz\n", encoding="utf-8")
    with pytest.raises(core_config.TomlConfigError, match="Failed to parse"):
        core_config.load_toml(broken)


def test_merge_defaults_nested_and_unknown_keys():
    base = {"quiz": {"seed": None, "default_questions": None}}
    core_config.merge_defaults(base, {"quiz": {"seed": 9}})
    assert base == {"quiz": {"seed": 9, "default_questions": None}}

    with pytest.raises(core_config.TomlConfigError, match="quiz.bogus"):
        core_config.merge_defaults(base, {"quiz": {"bogus": 1}})
    with pytest.raises(core_config.TomlConfigError, match="Expected table"):
        core_config.merge_defaults(base, {"quiz": 5})


def test_write_toml_template_respects_overwrite(tmp_path):
    target = tmp_path / "nested" / "out.toml"
    core_config.write_toml_template(target, template="a = 1\n")
    assert target.read_text(encoding="utf-8") == "a = 1\n"

    with pytest.raises(core_config.TomlConfigError, match="already exists"):
        core_config.write_toml_template(target, template="a = 2\n")

    core_config.write_toml_template(
        target, template="a = 2\n", overwrite=True
    )
    assert target.read_text(encoding="utf-8") == "a = 2\n"


def test_merge_defaults_checks_schema_types():
    schema = {
        "quiz.seed": core_config.Setting(int, "an integer"),
        "quiz.name": core_config.Setting(str, "a string"),
    }
    base = {"quiz": {"seed": None, "name": "java"}}

    core_config.merge_defaults(base, {"quiz": {"seed": 4}}, schema=schema)
    assert base["quiz"]["seed"] == 4

    with pytest.raises(core_config.TomlConfigError, match="quiz.seed must"):
        core_config.merge_defaults(
            base, {"quiz": {"seed": True}}, schema=schema
        )
    with pytest.raises(core_config.TomlConfigError, match="a string"):
        core_config.merge_defaults(base, {"quiz": {"name": 1}}, schema=schema)
    assert base["quiz"] == {"seed": 4, "name": "java"}
