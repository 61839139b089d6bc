"""Unit tests for the entity model: roster semantics and info rendering."""

from course_registry.models.entities import Course, OfflineDetails, OnlineDetails, Student, Teacher
from course_registry.models.enums import CourseKind


def test_student_and_teacher_display():
    assert str(Student(1, "Alex", "a@x.com")) == "Alex (a@x.com)"
    assert str(Teacher(2, "Ivan Petrov", "Physics")) == "Ivan Petrov - Physics"


def test_course_kind_follows_details():
    online = Course.online(1, "C#", "Teams", "teams.com/cs")
    offline = Course.offline(2, "Math", "Room 301", "Mon 10:00")

    assert online.kind is CourseKind.ONLINE
    assert isinstance(online.details, OnlineDetails)
    assert offline.kind is CourseKind.OFFLINE
    assert isinstance(offline.details, OfflineDetails)
    assert str(offline) == "2: Math"


def test_add_student_is_idempotent_and_keeps_order():
    course = Course.online(1, "C#", "Teams", "link")
    alex = Student(1, "Alex", "a@x.com")
    bea = Student(2, "Bea", "b@x.com")

    course.add_student(alex)
    course.add_student(bea)
    course.add_student(Student(1, "Alex again", "other@x.com"))

    assert course.student_ids == [1, 2]


def test_remove_student_only_touches_matching_id():
    course = Course.offline(1, "Math", "Room 1", "Fri")
    for sid in (1, 2, 3):
        course.add_student(Student(sid, f"S{sid}", f"s{sid}@x.com"))

    course.remove_student(Student(2, "S2", "s2@x.com"))
    assert course.student_ids == [1, 3]

    course.remove_student(Student(9, "Ghost", "g@x.com"))
    assert course.student_ids == [1, 3]


def test_roster_defaults_are_not_shared():
    first = Course.online(1, "A", "Zoom", "z")
    second = Course.online(2, "B", "Zoom", "z")
    first.add_student(Student(1, "Alex", "a@x.com"))
    assert second.student_ids == []


def test_render_info_online_with_teacher():
    course = Course.online(1, "Physics", "Zoom", "zoom.com/physics")
    course.add_student(Student(1, "Alex", "a@x.com"))

    info = course.render_info(Teacher(3, "Alexey Kozlov", "Physics"))

    assert info.splitlines() == [
        "Online course: Physics",
        "Platform: Zoom",
        "Link: zoom.com/physics",
        "Teacher: Alexey Kozlov",
        "Students: 1",
    ]


def test_render_info_offline_without_teacher():
    course = Course.offline(4, "Algorithms", "Room 205", "Tue/Thu 14:00-15:30")

    assert course.render_info() == (
        "Offline course: Algorithms\n"
        "Classroom: Room 205\n"
        "Schedule: Tue/Thu 14:00-15:30\n"
        "Teacher: Not assigned\n"
        "Students: 0"
    )


def test_render_info_explicit_student_count():
    course = Course.online(1, "C#", "Teams", "link")
    course.add_student(Student(1, "Alex", "a@x.com"))
    assert course.render_info(student_count=0).endswith("Students: 0")
