"""Lazy per-ZIP index over the property record source."""

import logging
from typing import Dict, Optional, Tuple

from .locks import KeyedLocks
from ..data.sources import RecordSource
from ..models.records import PropertyRecord

logger = logging.getLogger(__name__)


class RecordIndex:
    """Caches, per ZIP code, the property records located in that ZIP.
    
    The first lookup of a ZIP scans the whole record source; later lookups
    reuse the stored slice. A source that fails with ``OSError`` or returns
    nothing yields an empty slice, which is cached like any other so that a
    ZIP without data reads as "no data" rather than an error.
    """
    
    def __init__(self, record_source: RecordSource):
        self.record_source = record_source
        self._by_zip: Dict[int, Tuple[PropertyRecord, ...]] = {}
        self._locks = KeyedLocks()
    
    def records_for_zip(self, zip_code: int) -> Tuple[PropertyRecord, ...]:
        """Return the records whose ZIP code equals ``zip_code``.
        
        Args:
            zip_code: 5-digit ZIP code
            
        Returns:
            Tuple of matching records, possibly empty
        """
        records = self._by_zip.get(zip_code)
        if records is not None:
            return records
        
        with self._locks.lock_for(zip_code):
            records = self._by_zip.get(zip_code)
            if records is None:
                records = self._scan(zip_code)
                self._by_zip[zip_code] = records
        return records
    
    def _scan(self, zip_code: int) -> Tuple[PropertyRecord, ...]:
        try:
            all_records = self.record_source.read_records()
        except OSError as e:
            logger.warning(f"Could not read property records for ZIP {zip_code}: {e}")
            return ()
        
        if not all_records:
            logger.debug(f"Record source returned no records for ZIP {zip_code}")
            return ()
        
        matched = tuple(
            record for record in all_records
            if record is not None
            and record.zip_code is not None
            and record.zip_code == zip_code
        )
        logger.debug(
            f"Indexed {len(matched):,} of {len(all_records):,} records for ZIP {zip_code}"
        )
        return matched
    
    def is_indexed(self, zip_code: int) -> bool:
        return zip_code in self._by_zip
    
    def clear(self) -> None:
        self._by_zip.clear()
    
    def __len__(self) -> int:
        return len(self._by_zip)
