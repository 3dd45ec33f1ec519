"""Tests for the task file and configuration repositories."""

import datetime

import pytest
from yaml import safe_load

from workload import configuration
from workload.repository.configuration import ConfigurationRepository
from workload.repository.task import TaskFileError, TaskRepository


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(configuration, "CONFIG_PATH", tmp_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", tmp_path / "config.yaml")
    return tmp_path


class TestTaskRepository:
    def test_loads_list_and_applies_defaults(self, tmp_path):
        task_file = tmp_path / "tasks.yaml"
        task_file.write_text(
            "- key: A-1\n"
            "  assignee: Ann\n"
            "  created: 2024-01-01\n"
            "  due: '2024-01-03T10:00:00'\n"
            "  duration: 3\n"
            "- key: A-2\n"
            "  created: 2024-01-05\n"
        )
        tasks = TaskRepository(task_file).get_all_tasks()

        assert tasks[0]["assignee"] == "Ann"
        assert tasks[0]["created"] == datetime.date(2024, 1, 1)
        assert tasks[0]["due"] == "2024-01-03T10:00:00"
        assert tasks[0]["duration"] == 3
        assert tasks[1]["assignee"] == "Unassigned"
        assert tasks[1]["status"] == "-"
        assert tasks[1]["priority"] == "-"
        assert tasks[1]["due"] is None
        assert tasks[1]["duration"] == ""

    def test_loads_tasks_mapping(self, tmp_path):
        task_file = tmp_path / "tasks.yaml"
        task_file.write_text("tasks:\n  - key: A-1\n    assignee: Ann\n")
        repository = TaskRepository(task_file)
        assert [task["key"] for task in repository.get_all_tasks()] == ["A-1"]
        assert repository.get_assignees() == ["Ann"]

    def test_empty_file(self, tmp_path):
        task_file = tmp_path / "tasks.yaml"
        task_file.write_text("")
        assert TaskRepository(task_file).get_all_tasks() == []

    def test_skips_entries_that_are_not_mappings(self, tmp_path):
        task_file = tmp_path / "tasks.yaml"
        task_file.write_text("- key: A-1\n- just a string\n")
        assert len(TaskRepository(task_file).get_all_tasks()) == 1

    def test_returns_copies(self, tmp_path):
        task_file = tmp_path / "tasks.yaml"
        task_file.write_text("- key: A-1\n")
        repository = TaskRepository(task_file)
        repository.get_all_tasks()[0]["key"] = "changed"
        assert repository.get_all_tasks()[0]["key"] == "A-1"

    @pytest.mark.parametrize("content", ["key: [unclosed", "42", "tasks: nope"])
    def test_rejects_bad_content(self, tmp_path, content):
        task_file = tmp_path / "tasks.yaml"
        task_file.write_text(content)
        with pytest.raises(TaskFileError):
            TaskRepository(task_file).get_all_tasks()

    def test_missing_file(self, tmp_path):
        with pytest.raises(TaskFileError, match="Cannot read"):
            TaskRepository(tmp_path / "missing.yaml").get_all_tasks()


class TestConfigurationRepository:
    def test_defaults_without_file(self, config_dir):
        repository = ConfigurationRepository()
        assert repository.get_config() == configuration.get_default_configuration()

    def test_missing_keys_are_filled_in(self, config_dir):
        (config_dir / "config.yaml").write_text("granularity: week\n")
        config = ConfigurationRepository().get_config()
        assert config["granularity"] == "week"
        assert config["trailing_months"] == 6
        assert config["include_edge_idle"] is False

    def test_update_and_flush(self, config_dir):
        repository = ConfigurationRepository()
        repository.update_config(granularity="month", include_edge_idle=True)
        repository.flush()

        saved = safe_load((config_dir / "config.yaml").read_text())
        assert saved["granularity"] == "month"
        assert saved["include_edge_idle"] is True

        repository.reload()
        assert repository.get_config()["granularity"] == "month"

    def test_rejects_non_mapping(self, config_dir):
        (config_dir / "config.yaml").write_text("- a\n- b\n")
        with pytest.raises(ValueError):
            ConfigurationRepository().get_config()
