from .csv_file import StorageError, read_csv, write_csv

__all__ = ["StorageError", "read_csv", "write_csv"]
