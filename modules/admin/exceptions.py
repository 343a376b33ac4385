"""
Admin module exceptions.
"""

from shared.exceptions import NotFoundError


class ReportNotFoundError(NotFoundError):
    def __init__(self, report_id: str):
        super().__init__(
            f"Report not found: {report_id}",
            code="REPORT_NOT_FOUND",
            details={"report_id": report_id},
        )
