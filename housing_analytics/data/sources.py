"""Record and population sources consumed by the analytics engine."""

from pathlib import Path
from typing import Dict, List, Mapping, Optional, Protocol, Sequence, Union

from .loaders import load_properties, load_populations
from ..models.records import PropertyRecord


class RecordSource(Protocol):
    """Anything that can produce the full list of property records.
    
    Implementations raise ``OSError`` (usually ``DataSourceError``) when the
    records cannot be read.
    """
    
    def read_records(self) -> Optional[Sequence[PropertyRecord]]:
        ...


class PopulationSource(Protocol):
    """Anything that can produce the ZIP to population mapping."""
    
    def read_populations(self) -> Optional[Mapping[int, int]]:
        ...


class PropertyFileSource:
    """Reads property records from a CSV file on every call."""
    
    def __init__(self, filepath: Union[str, Path]):
        self.filepath = Path(filepath)
    
    def read_records(self) -> List[PropertyRecord]:
        return load_properties(self.filepath)
    
    def __repr__(self) -> str:
        return f"PropertyFileSource({str(self.filepath)!r})"


class PopulationFileSource:
    """Reads ZIP populations from a whitespace-separated file on every call."""
    
    def __init__(self, filepath: Union[str, Path]):
        self.filepath = Path(filepath)
    
    def read_populations(self) -> Dict[int, int]:
        return load_populations(self.filepath)
    
    def __repr__(self) -> str:
        return f"PopulationFileSource({str(self.filepath)!r})"


class InMemoryRecordSource:
    """Serves property records that were already loaded."""
    
    def __init__(self, records: Sequence[PropertyRecord]):
        self._records = list(records)
    
    def read_records(self) -> List[PropertyRecord]:
        return self._records
    
    def __len__(self) -> int:
        return len(self._records)


class InMemoryPopulationSource:
    """Serves a population mapping that was already loaded."""
    
    def __init__(self, populations: Mapping[int, int]):
        self._populations = dict(populations)
    
    def read_populations(self) -> Dict[int, int]:
        return self._populations
