from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .assignments.mysql_assignment_repository import MySQLAssignmentRepository, MySQLSubmissionRepository
from .assignments.repository import AssignmentRepository, SubmissionRepository
from .assignments.service import AssignmentService
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .auth.service import AuthService
from .auth.tokens import TokenService
from .classes.mysql_class_repository import MySQLClassRepository, MySQLLectureRepository
from .classes.repository import ClassRepository, LectureRepository
from .classes.service import ClassService
from .comments.mysql_comment_repository import MySQLCommentRepository
from .comments.repository import CommentRepository
from .comments.service import CommentService
from .core.constants import DEFAULT_TOKEN_TTL_HOURS
from .dashboard.service import DashboardService
from .database.connection import DBConfig, DatabaseConnection
from .students.mysql_student_repository import MySQLStudentRepository
from .students.repository import StudentRepository
from .students.service import StudentService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    users_repo: UserRepository
    students_repo: StudentRepository
    attendance_repo: AttendanceRepository
    classes_repo: ClassRepository
    lectures_repo: LectureRepository
    assignments_repo: AssignmentRepository
    submissions_repo: SubmissionRepository
    comments_repo: CommentRepository

    token_service: TokenService
    auth_service: AuthService
    student_service: StudentService
    attendance_service: AttendanceService
    class_service: ClassService
    assignment_service: AssignmentService
    comment_service: CommentService
    dashboard_service: DashboardService


def wire_container(
    *,
    users_repo: UserRepository,
    students_repo: StudentRepository,
    attendance_repo: AttendanceRepository,
    classes_repo: ClassRepository,
    lectures_repo: LectureRepository,
    assignments_repo: AssignmentRepository,
    submissions_repo: SubmissionRepository,
    comments_repo: CommentRepository,
    token_service: TokenService,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Build services on top of any set of repositories (MySQL or in-memory)."""
    return Container(
        conn=conn,
        users_repo=users_repo,
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        classes_repo=classes_repo,
        lectures_repo=lectures_repo,
        assignments_repo=assignments_repo,
        submissions_repo=submissions_repo,
        comments_repo=comments_repo,
        token_service=token_service,
        auth_service=AuthService(users_repo, token_service),
        student_service=StudentService(students_repo),
        attendance_service=AttendanceService(attendance_repo, students_repo),
        class_service=ClassService(classes_repo, lectures_repo),
        assignment_service=AssignmentService(assignments_repo, submissions_repo, classes_repo, students_repo),
        comment_service=CommentService(comments_repo),
        dashboard_service=DashboardService(
            classes_repo,
            assignments_repo,
            students_repo,
            attendance_repo,
            submissions_repo,
        ),
    )


def build_container(*, db_config: dict, jwt_secret: str, token_ttl_hours: int = DEFAULT_TOKEN_TTL_HOURS) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))

    return wire_container(
        conn=conn,
        users_repo=MySQLUserRepository(conn),
        students_repo=MySQLStudentRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        classes_repo=MySQLClassRepository(conn),
        lectures_repo=MySQLLectureRepository(conn),
        assignments_repo=MySQLAssignmentRepository(conn),
        submissions_repo=MySQLSubmissionRepository(conn),
        comments_repo=MySQLCommentRepository(conn),
        token_service=TokenService(jwt_secret, ttl_hours=token_ttl_hours),
    )
