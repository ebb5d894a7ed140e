"""Flattening of listing pages into a bounded article list."""

import logging
from typing import List, Sequence

from .payload import Listing
from .types import NewsRecord

logger = logging.getLogger(__name__)


def assemble_listing(listing: Listing, keys: Sequence[str], cap: int) -> List[NewsRecord]:
    """
    Merge a listing's sub-arrays into one ordered, de-duplicated list.

    Sub-arrays are concatenated in ``keys`` order, entries are
    de-duplicated by id (first occurrence wins) and the result is cut
    to ``cap`` entries. Entries without an id are skipped since they
    cannot be cached or de-duplicated. Ids 1 and "1" are distinct.

    Args:
        listing: Listing payload
        keys: Sub-array names in feed order
        cap: Maximum number of entries to return

    Returns:
        List of NewsRecord with unique ids
    """
    records: List[NewsRecord] = []
    seen = set()

    for key in keys:
        entries = listing.items.get(key)
        if not isinstance(entries, list):
            continue

        for entry in entries:
            if len(records) >= cap:
                return records
            if not isinstance(entry, dict):
                continue

            record = NewsRecord(entry)
            if not isinstance(record.id, (int, str)) or record.id == "":
                logger.debug(f"Skipping {key} entry without id: {record.title!r}")
                continue
            if record.id in seen:
                continue

            seen.add(record.id)
            records.append(record)

    return records
