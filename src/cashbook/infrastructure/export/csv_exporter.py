"""CSV report export - semicolon-delimited, spreadsheet-friendly."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from cashbook.application.queries.report_query import round_money
from cashbook.domain.movement import MovementType, MovementView
from cashbook.domain.shared.time import to_utc

CSV_HEADER = ("Concepto", "Monto", "Tipo", "Fecha", "Usuario")
CSV_DELIMITER = ";"
CSV_MEDIA_TYPE = "text/csv; charset=utf-8"
BOM = "\ufeff"

TYPE_LABELS: dict[MovementType, str] = {
    MovementType.INCOME: "Ingreso",
    MovementType.EXPENSE: "Egreso",
}


def _quote(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


def _format_amount(amount: Decimal) -> str:
    return f"{round_money(amount):.2f}"


def _format_row(movement: MovementView) -> str:
    return CSV_DELIMITER.join(
        (
            _quote(movement.concept),
            _format_amount(movement.amount),
            TYPE_LABELS[movement.type],
            to_utc(movement.date).date().isoformat(),
            _quote(movement.user_name),
        ),
    )


def to_csv(movements: Iterable[MovementView]) -> str:
    """Render movements as a BOM-prefixed CSV document, newest first.

    Excel needs the byte-order mark to detect UTF-8 and open accented
    characters correctly.
    """
    ordered = sorted(movements, key=lambda m: to_utc(m.date), reverse=True)
    lines = [CSV_DELIMITER.join(CSV_HEADER)]
    lines.extend(_format_row(movement) for movement in ordered)
    return BOM + "\n".join(lines)


def csv_filename(today: date) -> str:
    return f"reporte-movimientos-{today.isoformat()}.csv"
