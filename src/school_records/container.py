from __future__ import annotations

from dataclasses import dataclass

from .assignments.remote_assignment_repository import RemoteAssignmentRepository
from .assignments.service import AssignmentService
from .attendance.remote_attendance_repository import RemoteAttendanceRepository
from .attendance.service import AttendanceService
from .classes.remote_class_repository import RemoteClassRepository
from .classes.service import ClassService
from .database.connection import StoreConfig, StoreConnection
from .departments.remote_department_repository import RemoteDepartmentRepository
from .departments.service import DepartmentService
from .grades.remote_grade_repository import RemoteGradeRepository
from .grades.service import GradeService
from .reports.service import DashboardService, ReportService
from .students.remote_student_repository import RemoteStudentRepository
from .students.service import StudentService


@dataclass(frozen=True)
class Container:
    conn: StoreConnection

    students_repo: RemoteStudentRepository
    classes_repo: RemoteClassRepository
    grades_repo: RemoteGradeRepository
    attendance_repo: RemoteAttendanceRepository
    assignments_repo: RemoteAssignmentRepository
    departments_repo: RemoteDepartmentRepository

    student_service: StudentService
    class_service: ClassService
    grade_service: GradeService
    attendance_service: AttendanceService
    assignment_service: AssignmentService
    department_service: DepartmentService
    dashboard_service: DashboardService
    report_service: ReportService


def build_container(*, store_config: dict, conn: StoreConnection | None = None) -> Container:
    if conn is None:
        conn = StoreConnection.get_instance(StoreConfig.from_dict(store_config))

    students_repo = RemoteStudentRepository(conn)
    classes_repo = RemoteClassRepository(conn)
    grades_repo = RemoteGradeRepository(conn)
    attendance_repo = RemoteAttendanceRepository(conn)
    assignments_repo = RemoteAssignmentRepository(conn)
    departments_repo = RemoteDepartmentRepository(conn)

    return Container(
        conn=conn,
        students_repo=students_repo,
        classes_repo=classes_repo,
        grades_repo=grades_repo,
        attendance_repo=attendance_repo,
        assignments_repo=assignments_repo,
        departments_repo=departments_repo,
        student_service=StudentService(students_repo, grades_repo, attendance_repo),
        class_service=ClassService(classes_repo),
        grade_service=GradeService(grades_repo, students_repo),
        attendance_service=AttendanceService(attendance_repo, students_repo),
        assignment_service=AssignmentService(assignments_repo),
        department_service=DepartmentService(departments_repo),
        dashboard_service=DashboardService(students_repo, attendance_repo, grades_repo),
        report_service=ReportService(students_repo, attendance_repo, grades_repo),
    )
