from cashbook.infrastructure.export.csv_exporter import (
    CSV_MEDIA_TYPE,
    csv_filename,
    to_csv,
)

__all__ = ["CSV_MEDIA_TYPE", "csv_filename", "to_csv"]
