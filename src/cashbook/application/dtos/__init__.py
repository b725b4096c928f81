from cashbook.application.dtos.movement_dto import MovementPage
from cashbook.application.dtos.report_dto import MonthlyData, Report

__all__ = ["MonthlyData", "MovementPage", "Report"]
