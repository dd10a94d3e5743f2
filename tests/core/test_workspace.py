from __future__ import annotations

import pytest

from interview_prep.core import workspace as workspace_mod


def test_ensure_workspace_creates_layout(tmp_path):
    root = tmp_path / "ws"

    layout = workspace_mod.ensure_workspace(path=root, env={})

    assert layout.home == root.resolve()
    assert layout.path_for("config") == root.resolve() / "config"
    assert layout.path_for("logs").is_dir()
    assert layout.created["home"] is True

    again = workspace_mod.ensure_workspace(path=root, env={})
    assert again.created["logs"] is False


def test_ensure_workspace_reads_env_override(tmp_path):
    root = tmp_path / "from-env"

    layout = workspace_mod.ensure_workspace(
        env={workspace_mod.WORKSPACE_ENV: f"  {root}  "}
    )

    assert layout.home == root.resolve()


def test_ensure_workspace_rejects_file_root(tmp_path):
    root = tmp_path / "file"
    root.write_text("x", encoding="utf-8")

    with pytest.raises(workspace_mod.WorkspaceError):
        workspace_mod.ensure_workspace(path=root, env={})


def test_describe_without_create_does_not_touch_disk(tmp_path):
    root = tmp_path / "lazy"

    layout = workspace_mod.ensure_workspace(path=root, env={}, create=False)

    assert not root.exists()
    assert layout.created == {"home": False, "config": False, "logs": False}


def test_path_for_unknown_key(tmp_path):
    layout = workspace_mod.ensure_workspace(path=tmp_path / "ws", env={})

    with pytest.raises(KeyError):
        layout.path_for("rag_dbs")
