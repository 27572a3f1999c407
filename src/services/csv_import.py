"""CSV import - parse an uploaded file and insert its listings."""

import csv
import io
import os
from typing import Optional, Union

from src.models.listing import ImportResult
from src.models.reviewer import Reviewer
from src.services.import_mapper import map_import_batch
from src.services.supabase_client import insert_listings
from src.utils.errors import CsvImportError
from src.utils.logging import get_structured_logger, log_timing, mask_email, timed

logger = get_structured_logger(__name__)


def max_import_bytes() -> int:
    return int(os.environ.get("IMPORT_MAX_BYTES", str(10 * 1024 * 1024)))


@timed("csv_parse")
def parse_csv(data: Union[bytes, str]) -> list[dict[str, Optional[str]]]:
    """
    Parse CSV text with a header row into row mappings.
    
    Blank lines are skipped and cells beyond the header are ignored. Any
    structural problem fails the whole file with CsvImportError.
    """
    if isinstance(data, bytes):
        if len(data) > max_import_bytes():
            raise CsvImportError("CSV file is too large")
        try:
            data = data.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise CsvImportError(f"CSV file is not valid UTF-8: {e}")
    
    reader = csv.DictReader(io.StringIO(data, newline=""), strict=True)
    try:
        rows = []
        for record in reader:
            row = {key: value for key, value in record.items() if key is not None}
            if any(value and value.strip() for value in row.values()):
                rows.append(row)
    except csv.Error as e:
        raise CsvImportError(f"Failed to parse CSV file (line {reader.line_num}): {e}")
    return rows


async def import_listings(data: Union[bytes, str], reviewer: Reviewer) -> ImportResult:
    """Parse a CSV upload, map its rows and insert them as pending listings."""
    with log_timing("csv_import", logger=logger, reviewer=mask_email(reviewer.email)):
        rows = parse_csv(data)
        listings = map_import_batch(rows)
        dropped = len(rows) - len(listings)
        
        if dropped:
            logger.info("Dropped rows without property URL", dropped=dropped)
        
        await insert_listings([listing.to_insert_payload() for listing in listings])
        
        logger.info(
            "Imported listings",
            imported=len(listings),
            dropped=dropped,
            reviewer_id=reviewer.user_id,
        )
        return ImportResult(imported=len(listings), dropped=dropped)
