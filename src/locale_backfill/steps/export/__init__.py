from .locales import ExportLocalesStep
from .report_md import ExportReportMdStep

__all__ = ["ExportLocalesStep", "ExportReportMdStep"]
