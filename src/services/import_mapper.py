"""Map parsed CSV rows to listing records ready for insert."""

import math
import re
from collections.abc import Iterable, Mapping
from typing import Optional

from src.models.listing import Listing

URL_COLUMN = "property_url"
DESCRIPTION_COLUMNS = ("property_features", "description")
PHOTO_PREFIX = "photo_"
PRIMARY_IMAGE_COLUMN = "primary_image"
IMAGES_COLUMN = "images"

# CSV column -> Listing field for plain optional text
TEXT_COLUMNS = {
    "address": "address",
    "year_built": "year_built",
    "garage": "garage",
    "type": "type",
    "offer_type": "offer_type",
}

_PRICE_JUNK = re.compile(r"[^\d.\-]")
_FLOAT_PREFIX = re.compile(r"\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)")
_INT_PREFIX = re.compile(r"\s*([-+]?\d+)")
_IMAGE_SEPARATORS = re.compile(r"[,;]")


def _text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def parse_price(value: Optional[str]) -> Optional[float]:
    """Strip everything but digits, '.' and '-', then parse; unparsable gives None."""
    if not value:
        return None
    cleaned = _PRICE_JUNK.sub("", value)
    try:
        price = float(cleaned)
    except ValueError:
        return None
    return price if math.isfinite(price) else None


def parse_float(value: Optional[str]) -> Optional[float]:
    """Parse the leading number of a value such as "88" or "88 m2"."""
    if not value:
        return None
    match = _FLOAT_PREFIX.match(value)
    if not match:
        return None
    number = float(match.group(1))
    return number if math.isfinite(number) else None


def parse_int(value: Optional[str]) -> Optional[int]:
    """Parse the leading integer of a value; "3.7" gives 3."""
    if not value:
        return None
    match = _INT_PREFIX.match(value)
    if not match:
        return None
    return int(match.group(1))


def _photo_columns(row: Mapping[str, Optional[str]]) -> list[str]:
    return [key for key in row if key and key.startswith(PHOTO_PREFIX)]


def _photos_from_columns(row: Mapping[str, Optional[str]], columns: list[str]) -> list[str]:
    """One URL per photo_* column, in column order."""
    urls = []
    for column in columns:
        url = _text(row.get(column))
        if url:
            urls.append(url)
    return urls


def _photos_from_image_list(row: Mapping[str, Optional[str]]) -> list[str]:
    """Primary image first, then the comma/semicolon separated images column."""
    urls = []
    primary = _text(row.get(PRIMARY_IMAGE_COLUMN))
    if primary:
        urls.append(primary)
    for piece in _IMAGE_SEPARATORS.split(row.get(IMAGES_COLUMN) or ""):
        piece = piece.strip()
        if piece:
            urls.append(piece)
    return urls


def extract_photo_urls(row: Mapping[str, Optional[str]]) -> Optional[list[str]]:
    """
    Collect the row's photo URLs, or None when it has none.
    
    Two export layouts are supported and told apart by their columns: one
    ``photo_*`` column per image, or a ``primary_image`` column plus a
    delimited ``images`` column. When ``photo_*`` columns exist they win.
    """
    columns = _photo_columns(row)
    if columns:
        urls = _photos_from_columns(row, columns)
    elif PRIMARY_IMAGE_COLUMN in row or IMAGES_COLUMN in row:
        urls = _photos_from_image_list(row)
    else:
        urls = []
    return urls or None


def map_import_row(row: Mapping[str, Optional[str]]) -> Optional[Listing]:
    """
    Convert one parsed CSV row into a pending listing.
    
    Returns None when the row has no property URL; such rows are left out of
    the import. Malformed numeric fields become None instead of failing.
    """
    url = _text(row.get(URL_COLUMN))
    if not url:
        return None

    description = None
    for column in DESCRIPTION_COLUMNS:
        description = _text(row.get(column))
        if description:
            break

    fields = {field: _text(row.get(column)) for column, field in TEXT_COLUMNS.items()}

    return Listing(
        property_url=url,
        description=description,
        price=parse_price(row.get("price")),
        area_m2=parse_float(row.get("area_m2")),
        rooms=parse_int(row.get("rooms")),
        photo_urls=extract_photo_urls(row),
        status="pending",
        **fields,
    )


def map_import_batch(rows: Iterable[Mapping[str, Optional[str]]]) -> list[Listing]:
    """Map every row, dropping rows without a URL and keeping input order."""
    listings = []
    for row in rows:
        listing = map_import_row(row)
        if listing is not None:
            listings.append(listing)
    return listings
