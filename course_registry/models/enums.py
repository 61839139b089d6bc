"""
Enumerations for the Course Registry
"""
from enum import Enum


class CourseKind(Enum):
    """Course delivery format"""
    ONLINE = "ONLINE"
    OFFLINE = "OFFLINE"

    def __str__(self):
        return self.value
