from dataclasses import dataclass, field
from typing import List, Optional, Union

from course_registry.models.enums import CourseKind

NOT_ASSIGNED = "Not assigned"


@dataclass
class Student:
    id: int
    name: str
    email: str

    def __str__(self):
        return f"{self.name} ({self.email})"


@dataclass
class Teacher:
    id: int
    name: str
    department: str

    def __str__(self):
        return f"{self.name} - {self.department}"


@dataclass
class OnlineDetails:
    platform: str
    meeting_link: str


@dataclass
class OfflineDetails:
    room: str
    schedule: str  # Free text, e.g. "Mon/Wed 10:00-11:30"


@dataclass
class Course:
    id: int
    name: str
    details: Union[OnlineDetails, OfflineDetails]
    teacher_id: Optional[int] = None
    student_ids: List[int] = field(default_factory=list)  # Enrollment order

    @classmethod
    def online(cls, course_id: int, name: str, platform: str, meeting_link: str) -> "Course":
        return cls(id=course_id, name=name, details=OnlineDetails(platform, meeting_link))

    @classmethod
    def offline(cls, course_id: int, name: str, room: str, schedule: str) -> "Course":
        return cls(id=course_id, name=name, details=OfflineDetails(room, schedule))

    @property
    def kind(self) -> CourseKind:
        if isinstance(self.details, OnlineDetails):
            return CourseKind.ONLINE
        return CourseKind.OFFLINE

    def add_student(self, student: Student):
        """Adds the student to the roster unless one with the same id is already on it."""
        if student.id not in self.student_ids:
            self.student_ids.append(student.id)

    def remove_student(self, student: Student):
        """Removes the roster entry matching the student's id, if any."""
        if student.id in self.student_ids:
            self.student_ids.remove(student.id)

    def render_info(self, teacher: Optional[Teacher] = None, student_count: Optional[int] = None) -> str:
        """
        Builds a multi-line summary of the course.

        Args:
            teacher: The resolved teacher for ``teacher_id``, or None
            student_count: Number of roster entries that resolve to a student,
                defaults to the roster length

        Returns:
            Variant heading and fields, teacher name and roster size
        """
        if self.kind is CourseKind.ONLINE:
            lines = [
                f"Online course: {self.name}",
                f"Platform: {self.details.platform}",
                f"Link: {self.details.meeting_link}",
            ]
        else:
            lines = [
                f"Offline course: {self.name}",
                f"Classroom: {self.details.room}",
                f"Schedule: {self.details.schedule}",
            ]
        lines.append(f"Teacher: {teacher.name if teacher else NOT_ASSIGNED}")
        if student_count is None:
            student_count = len(self.student_ids)
        lines.append(f"Students: {student_count}")
        return "\n".join(lines)

    def __str__(self):
        return f"{self.id}: {self.name}"
