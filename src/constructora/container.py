from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Callable, Optional

from .ai.gemini import DEFAULT_API_BASE, GeminiService
from .ai.insights import InsightService
from .ai.rate_limit import FixedWindowRateLimiter
from .applications.mysql_application_repository import MySQLApplicationRepository
from .applications.repository import ApplicationRepository
from .applications.service import ApplicationService
from .attendance.factory import AttendanceStrategyFactory
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .auth.service import AdminAuthService
from .budgets.service import BudgetService
from .common.datetime_utils import now_in_zone
from .core.settings import PortalSettings
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .employees.workspace_service import WorkspaceHRService
from .finance.service import FinanceService
from .notifications.mysql_notification_repository import MySQLNotificationRepository
from .notifications.repository import NotificationRepository
from .notifications.service import NotificationService
from .payroll.service import PayrollService
from .projects.service import ProjectService
from .reports.service import MetricsService
from .storage.mysql_kv_store import MySQLKeyValueStore
from .storage.repository import KeyValueStore
from .storage.service import WorkspaceStorage


@dataclass(frozen=True)
class Container:
    portal_settings: PortalSettings
    storage: WorkspaceStorage

    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository
    applications_repo: ApplicationRepository
    notifications_repo: NotificationRepository

    notification_service: NotificationService
    attendance_service: AttendanceService
    employee_service: EmployeeService
    application_service: ApplicationService

    auth_service: AdminAuthService
    project_service: ProjectService
    finance_service: FinanceService
    budget_service: BudgetService
    workspace_hr_service: WorkspaceHRService
    payroll_service: PayrollService
    metrics_service: MetricsService

    gemini_service: GeminiService
    rate_limiter: FixedWindowRateLimiter
    insight_service: InsightService


def assemble(
    *,
    settings: Any,
    employees_repo: EmployeeRepository,
    attendance_repo: AttendanceRepository,
    applications_repo: ApplicationRepository,
    notifications_repo: NotificationRepository,
    kv_store: KeyValueStore,
    gemini_service: Optional[GeminiService] = None,
    clock: Optional[Callable[[], datetime]] = None,
    rate_clock: Optional[Callable[[], float]] = None,
) -> Container:
    """Wire services over already-built repositories.

    ``build_container`` passes the MySQL repositories; tests pass in-memory
    fakes and a fixed clock.
    """
    portal_settings = PortalSettings.from_settings(settings)
    clock = clock or (lambda: now_in_zone(portal_settings.timezone))

    def today() -> date:
        return clock().date()

    storage = WorkspaceStorage(kv_store)
    notification_service = NotificationService(notifications_repo)
    attendance_service = AttendanceService(
        attendance_repo,
        employees_repo,
        notification_service,
        portal_settings,
        strategy_factory=AttendanceStrategyFactory(),
        clock=clock,
    )
    employee_service = EmployeeService(employees_repo, attendance_repo, portal_settings, clock=clock)
    application_service = ApplicationService(applications_repo, notification_service, portal_settings)

    project_service = ProjectService(storage, today=today)
    finance_service = FinanceService(storage, today=today)
    metrics_service = MetricsService(storage)

    if gemini_service is None:
        gemini_service = GeminiService(
            getattr(settings, "GEMINI_API_KEY", None),
            api_base=getattr(settings, "GEMINI_API_BASE", DEFAULT_API_BASE),
            timeout=float(getattr(settings, "GEMINI_TIMEOUT_SECONDS", 60)),
        )

    return Container(
        portal_settings=portal_settings,
        storage=storage,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        applications_repo=applications_repo,
        notifications_repo=notifications_repo,
        notification_service=notification_service,
        attendance_service=attendance_service,
        employee_service=employee_service,
        application_service=application_service,
        auth_service=AdminAuthService(
            storage, default_password=getattr(settings, "DEFAULT_ADMIN_PASSWORD", "admin123")
        ),
        project_service=project_service,
        finance_service=finance_service,
        budget_service=BudgetService(project_service),
        workspace_hr_service=WorkspaceHRService(storage, today=today),
        payroll_service=PayrollService(),
        metrics_service=metrics_service,
        gemini_service=gemini_service,
        rate_limiter=FixedWindowRateLimiter(
            max_requests=int(getattr(settings, "RATE_LIMIT_MAX", 60)),
            window_seconds=float(getattr(settings, "RATE_LIMIT_WINDOW_SECONDS", 600)),
            clock=rate_clock,
        ),
        insight_service=InsightService(
            gemini_service, projects=project_service, finance=finance_service, metrics=metrics_service
        ),
    )


def build_container(*, settings: Any) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(settings.DB_CONFIG))
    return assemble(
        settings=settings,
        employees_repo=MySQLEmployeeRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        applications_repo=MySQLApplicationRepository(conn),
        notifications_repo=MySQLNotificationRepository(conn),
        kv_store=MySQLKeyValueStore(conn),
    )
