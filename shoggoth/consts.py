"""Teacher tasks and application roles with their names."""

from __future__ import annotations

from enum import Enum


class TeacherTask(Enum):
    """Commands a teacher batch may hold."""

    UNKNOWN = "TEACHER_CMD_UNKNOWN"
    VALUE_TO_LAYER = "VALUE_TO_LAYER"
    VALUES_TO_LAYER = "VALUES_TO_LAYER"
    IMAGE_TO_LAYER = "IMAGE_TO_LAYER"
    FOLDER_TO_LAYER = "FOLDER_TO_LAYER"
    GUID_TO_LAYER = "GUID_TO_LAYER"
    HID_TO_LAYER = "HID_TO_LAYER"


class Role(Enum):
    """Role a running application plays."""

    TEACHER = "teacher"
    PROCESSOR = "processor"
    SERVER = "server"
    UI = "ui"


def teacher_task_to_string(task: TeacherTask) -> str:
    """Name of a teacher task."""
    return task.value


def string_to_teacher_task(name: str) -> TeacherTask:
    """Teacher task for a name, or UNKNOWN when the name is not known."""
    try:
        return TeacherTask(name)
    except ValueError:
        return TeacherTask.UNKNOWN


def role_to_string(role: Role) -> str:
    """Name of a role."""
    return role.value


def role_from_string(name: str) -> Role:
    """Role for a name; anything unknown is the processor role."""
    try:
        return Role(name)
    except ValueError:
        return Role.PROCESSOR