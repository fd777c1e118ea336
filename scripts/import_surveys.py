"""
Import the survey CSV export into the configured database.

Usage: python scripts/import_surveys.py data.csv
"""
import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from app.core.exceptions import DataImportError
from app.core.logging import setup_logging
from app.database import SessionLocal, init_db
from app.services.survey_importer import SurveyImporter

logger = logging.getLogger("import_surveys")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Import the semicolon-separated survey export.")
    parser.add_argument("csv_path", help="path to the CSV export")
    args = parser.parse_args(argv)

    setup_logging()
    init_db()

    with SessionLocal() as db:
        try:
            count = SurveyImporter(db).import_csv(args.csv_path)
        except DataImportError as e:
            logger.error(e.message, extra={"details": e.details})
            return 1

    print(f"Import completed successfully! Processed {count} rows.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
