from .report_service import ReportService, ConsoleReporter, NullReporter

__all__ = ["ReportService", "ConsoleReporter", "NullReporter"]
