from __future__ import annotations

import pytest

from interview_prep.quizzer import config as cfg


def test_load_config_defaults(tmp_path):
    result = cfg.load_config(env={}, workspace_path=tmp_path / "ws")

    assert result.config_path is None
    assert result.config == cfg.QuizConfig(
        default_questions=None, seed=None, log_level="INFO"
    )
    assert result.layout.path_for("logs").is_dir()


def test_load_config_reads_workspace_file(tmp_path):
    root = tmp_path / "ws"
    config_file = root / "config" / cfg.CONFIG_FILENAME
    config_file.parent.mkdir(parents=True)
    config_file.write_text(
        "[quiz]\ndefault_questions = 5\nseed = 12\n\n"
        '[logging]\nlevel = "debug"\n',
        encoding="utf-8",
    )

    result = cfg.load_config(env={}, workspace_path=root)

    assert result.config_path == config_file.resolve()
    assert result.config.default_questions == 5
    assert result.config.seed == 12
    assert result.config.log_level == "DEBUG"


def test_precedence_cli_over_env_over_file(tmp_path):
    config_file = tmp_path / "custom.toml"
    config_file.write_text("[quiz]\nseed = 1\ndefault_questions = 3\n")
    env = {
        "INTERVIEW_PREP_SEED": "2",
        "INTERVIEW_PREP_DEFAULT_QUESTIONS": "4",
        "INTERVIEW_PREP_LOG_LEVEL": "warning",
    }

    result = cfg.load_config(
        config_path=config_file,
        overrides=cfg.ConfigOverrides(seed=3),
        env=env,
        workspace_path=tmp_path / "ws",
    )

    assert result.config.seed == 3
    assert result.config.default_questions == 4
    assert result.config.log_level == "WARNING"


def test_config_env_points_to_file(tmp_path):
    config_file = tmp_path / "env.toml"
    config_file.write_text("[quiz]\nseed = 99\n", encoding="utf-8")

    result = cfg.load_config(
        env={cfg.CONFIG_ENV: str(config_file)},
        workspace_path=tmp_path / "ws",
    )

    assert result.config.seed == 99


@pytest.mark.parametrize(
    ("content", "message"),
    [
        ("[quiz]\nbogus = 1\n", "Unknown configuration key 'quiz.bogus'"),
        ("[quiz]\nseed = 'abc'\n", "quiz.seed must be an integer"),
        ("[quiz]\nseed = true\n", "quiz.seed must be an integer"),
        ("[logging]\nlevel = 3\n", "logging.level must be a non-empty"),
        ("[quiz]\ndefault_questions = 0\n", "at least 1"),
        ("[logging]\nlevel = ''\n", "logging.level"),
        ("[quiz\n", "Failed to parse"),
    ],
)
def test_invalid_config_files(tmp_path, content, message):
    config_file = tmp_path / "bad.toml"
    config_file.write_text(content, encoding="utf-8")

    with pytest.raises(cfg.InterviewPrepConfigError, match=message):
        cfg.load_config(
            config_path=config_file, env={}, workspace_path=tmp_path / "ws"
        )


def test_missing_explicit_config_is_an_error(tmp_path):
    with pytest.raises(cfg.InterviewPrepConfigError, match="not found"):
        cfg.load_config(
            config_path=tmp_path / "missing.toml",
            env={},
            workspace_path=tmp_path / "ws",
        )


def test_invalid_env_integer(tmp_path):
    with pytest.raises(cfg.InterviewPrepConfigError, match="SEED"):
        cfg.load_config(
            env={"INTERVIEW_PREP_SEED": "soon"},
            workspace_path=tmp_path / "ws",
        )


def test_template_round_trips_through_loader(tmp_path):
    target = cfg.write_template(tmp_path / "out" / cfg.CONFIG_FILENAME)

    result = cfg.load_config(
        config_path=target, env={}, workspace_path=tmp_path / "ws"
    )

    assert "[quiz]" in cfg.read_template()
    assert result.config.log_level == "INFO"
    with pytest.raises(cfg.InterviewPrepConfigError, match="already exists"):
        cfg.write_template(target)
