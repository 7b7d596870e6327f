from enum import Enum


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    UNIQUENESS_CONFLICT = "uniqueness_conflict"
    REFERENTIAL_CONFLICT = "referential_conflict"
    NOT_FOUND = "not_found"
    GENERIC = "generic"


class AcademicLevel(str, Enum):
    BACHELOR = "Bachelor"
    MASTER = "Master"
    DOCTORATE = "Doctorate"


class CareerStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


class CourseLevel(str, Enum):
    DIPLOMA = "Diploma"
    BACHELOR = "Bachelor"
    POSTGRAD = "Postgrad"


class CourseModality(str, Enum):
    IN_PERSON = "In-person"
    ONLINE = "Online"
    HYBRID = "Hybrid"


class CourseStatus(str, Enum):
    ACTIVE = "Active"
    PAUSED = "Paused"
    FINISHED = "Finished"


class StudentStatus(str, Enum):
    ACTIVE = "Active"
    TEMPORARY_LEAVE = "TemporaryLeave"
    GRADUATED = "Graduated"
    PERMANENT_LEAVE = "PermanentLeave"


def values(enum_cls) -> tuple:
    return tuple(member.value for member in enum_cls)
