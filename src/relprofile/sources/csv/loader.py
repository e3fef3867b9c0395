"""CSV file loader - untyped source with VARCHAR-first approach."""

from __future__ import annotations

import time
from pathlib import Path

import duckdb

from relprofile.core.config import get_settings
from relprofile.core.logging import get_logger
from relprofile.core.models import Result
from relprofile.sources.relation import Relation

logger = get_logger(__name__)


class CSVLoader:
    """Loader for CSV files.

    CSV files are untyped sources - all data is text. Every column is read as
    VARCHAR so that profiling compares the raw values exactly as they appear in
    the file; empty fields and NULLs both become the empty string.
    """

    def __init__(
        self,
        delimiter: str | None = None,
        quote: str | None = None,
        header: bool | None = None,
    ):
        settings = get_settings()
        self.delimiter = delimiter if delimiter is not None else settings.csv_delimiter
        self.quote = quote if quote is not None else settings.csv_quote
        self.header = header if header is not None else settings.csv_header

    def load(self, path: Path | str, name: str | None = None) -> Result[Relation]:
        """Load a CSV file into a Relation.

        Args:
            path: Path to the CSV file
            name: Relation name (default: file stem)

        Returns:
            Result containing the Relation
        """
        path = Path(path)
        if not path.exists():
            return Result.fail(f"CSV file not found: {path}")
        if not path.is_file():
            return Result.fail(f"Path is not a file: {path}")

        start_time = time.time()
        conn = duckdb.connect(":memory:")
        try:
            rel = conn.read_csv(
                str(path),
                header=self.header,
                sep=self.delimiter,
                quotechar=self.quote,
                all_varchar=True,
            )
            attributes = tuple(rel.columns)
            rows = rel.fetchall()
        except (duckdb.Error, UnicodeDecodeError) as e:
            return Result.fail(f"Failed to read CSV {path}: {e}")
        finally:
            conn.close()

        relation = Relation.from_rows(name or path.stem, attributes, rows)
        logger.debug(
            "csv_loaded",
            path=str(path),
            relation=relation.name,
            rows=relation.num_rows,
            attributes=relation.num_attributes,
            seconds=round(time.time() - start_time, 4),
        )
        return Result.ok(relation)

    def load_directory(
        self,
        directory_path: Path | str,
        file_pattern: str = "*.csv",
    ) -> Result[list[Relation]]:
        """Load all CSV files from a directory.

        Files are loaded in name order. Files that fail to load are skipped and
        reported as warnings; the call fails only if nothing could be loaded.

        Args:
            directory_path: Path to the directory containing CSV files
            file_pattern: Glob pattern for CSV files (default: "*.csv")

        Returns:
            Result containing one Relation per file
        """
        directory = Path(directory_path)
        if not directory.exists():
            return Result.fail(f"Directory not found: {directory}")
        if not directory.is_dir():
            return Result.fail(f"Path is not a directory: {directory}")

        csv_files = sorted(directory.glob(file_pattern))
        if not csv_files:
            return Result.fail(f"No CSV files found matching '{file_pattern}' in {directory}")

        relations: list[Relation] = []
        warnings: list[str] = []
        for csv_file in csv_files:
            file_result = self.load(csv_file)
            if not file_result.success:
                warnings.append(f"Failed to load {csv_file.name}: {file_result.error}")
                continue
            relations.append(file_result.unwrap())

        if not relations:
            return Result.fail("No CSV files were successfully loaded")

        return Result.ok(relations, warnings=warnings)

    def load_paths(self, paths: list[Path]) -> Result[list[Relation]]:
        """Load a mix of CSV files and directories, preserving argument order."""
        relations: list[Relation] = []
        warnings: list[str] = []
        for path in paths:
            if path.is_dir():
                result = self.load_directory(path)
                if not result.success:
                    return Result.fail(result.error or f"Failed to load {path}")
                relations.extend(result.unwrap())
                warnings.extend(result.warnings)
            else:
                file_result = self.load(path)
                if not file_result.success:
                    return Result.fail(file_result.error or f"Failed to load {path}")
                relations.append(file_result.unwrap())
        return Result.ok(relations, warnings=warnings)
