from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol


@dataclass(frozen=True)
class Project:
    name: str


@dataclass(frozen=True)
class Tag:
    name: str


@dataclass(frozen=True)
class Task:
    name: str
    estimated_minutes: int | None = None
    project: Project | None = None


@dataclass(frozen=True)
class Selection:
    tasks: tuple[Task, ...] = field(default_factory=tuple)
    tags: tuple[Tag, ...] = field(default_factory=tuple)
    projects: tuple[Project, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return not (self.tasks or self.tags or self.projects)


class SelectionSource(Protocol):
    def current(self) -> Selection:
        ...


class StaticSelection:
    def __init__(self, selection: Selection | None = None) -> None:
        self._selection = selection or Selection()

    def current(self) -> Selection:
        return self._selection


@dataclass(frozen=True)
class StartDefaults:
    description: str
    minutes: str


def is_start_applicable(selection: Selection) -> bool:
    counts = (len(selection.tasks), len(selection.tags), len(selection.projects))
    return sorted(counts) == [0, 0, 1]


def start_defaults(
    selection: Selection,
    fallback_minutes: str = "25",
    prefer_project_name: bool = False,
) -> StartDefaults:
    if len(selection.tasks) == 1:
        task = selection.tasks[0]
        minutes = str(task.estimated_minutes) if task.estimated_minutes else fallback_minutes
        if prefer_project_name and task.project is not None:
            return StartDefaults(task.project.name, minutes)
        return StartDefaults(task.name, minutes)
    if len(selection.tags) == 1:
        return StartDefaults(selection.tags[0].name, fallback_minutes)
    if len(selection.projects) == 1:
        return StartDefaults(selection.projects[0].name, fallback_minutes)
    return StartDefaults("", fallback_minutes)
