# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from pathlib import Path
from typing import Any, Optional

from yaml import YAMLError, load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from workload.model.task import UNASSIGNED, TaskRecord

logger = logging.getLogger(__name__)


class TaskFileError(ValueError):
    pass


class TaskRepository:
    """Read-only access to the task records stored in a YAML file."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self._tasks: Optional[list[TaskRecord]] = None

    @property
    def tasks(self) -> list[TaskRecord]:
        if self._tasks is None:
            self.__load_data()
        if self._tasks is None:
            raise ValueError()
        return self._tasks

    def __load_data(self) -> None:
        try:
            raw = load(self.path.read_text(), Loader=Loader)
        except OSError as e:
            raise TaskFileError(f"Cannot read task file {self.path}: {e}") from e
        except YAMLError as e:
            raise TaskFileError(f"Task file {self.path} is not valid YAML: {e}") from e

        # Either a bare list of records or a mapping with a tasks list
        if isinstance(raw, dict):
            raw = raw.get("tasks")
        if raw is None:
            raw = []
        if not isinstance(raw, list):
            raise TaskFileError(f"Task file {self.path} must hold a list of tasks")

        self._tasks = []
        for position, raw_task in enumerate(raw):
            if not isinstance(raw_task, dict):
                logger.warning(
                    "Skipping entry %d in %s, expected a mapping", position, self.path
                )
                continue
            self._tasks.append(self.__convert_task_for_deserialization(raw_task))
        logger.debug("Loaded %d tasks from %s", len(self._tasks), self.path)

    def __convert_task_for_deserialization(self, raw_task: dict[str, Any]) -> TaskRecord:
        duration = raw_task.get("duration")
        return {
            "key": str(raw_task.get("key") or "-"),
            "assignee": str(raw_task.get("assignee") or UNASSIGNED),
            "status": str(raw_task.get("status") or "-"),
            "priority": str(raw_task.get("priority") or "-"),
            "summary": str(raw_task.get("summary") or "-"),
            "created": raw_task.get("created") or None,
            "due": raw_task.get("due") or None,
            "duration": "" if duration is None else duration,
        }

    def get_all_tasks(self) -> list[TaskRecord]:
        return deepcopy(self.tasks)

    def get_assignees(self) -> list[str]:
        return sorted({task["assignee"] for task in self.tasks})
