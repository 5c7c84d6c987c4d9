"""Service for loading the word catalog."""
import json
import logging
from pathlib import Path
from typing import Any, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from phonicsdrill.config import settings
from phonicsdrill.exceptions import CatalogLoadError
from phonicsdrill.models.drill_models import Number, WordCategory, WordRecord, as_number
from phonicsdrill import monitoring

logger = logging.getLogger(__name__)


class Catalog:
    """Immutable, ordered list of catalog words."""

    def __init__(self, records: Iterable[WordRecord]):
        self._records: Tuple[WordRecord, ...] = tuple(records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[WordRecord]:
        return iter(self._records)

    @property
    def records(self) -> Tuple[WordRecord, ...]:
        return self._records

    def levels(self) -> List[Number]:
        """Get the sorted distinct levels that have a usable number."""
        return sorted({r.level for r in self._records if r.level is not None})

    def weeks(self, level) -> List[Number]:
        """Get the sorted distinct weeks available for a level."""
        level = as_number(level)
        if level is None:
            return []
        return sorted({
            r.week for r in self._records
            if r.level == level and r.week is not None
        })

    def words_for(self, level, week) -> List[WordRecord]:
        """Get the words of a level and week, in catalog order."""
        return [r for r in self._records if r.matches(level, week)]


def parse_record(item: Any, alien_category: str = "alien") -> Optional[WordRecord]:
    """Turn one raw catalog entry into a WordRecord, or None if it is unusable."""
    if not isinstance(item, dict):
        return None

    word = item.get("word")
    if not isinstance(word, str) or not word.strip():
        return None

    tag = item.get("type", item.get("category"))
    if isinstance(tag, str) and tag.strip().lower() == alien_category.lower():
        category = WordCategory.ALIEN
    else:
        category = WordCategory.NORMAL

    return WordRecord(
        word=word,
        level=as_number(item.get("level")),
        week=as_number(item.get("week")),
        category=category,
    )


def parse_catalog(items: Sequence[Any], alien_category: str = "alien") -> Catalog:
    """Build a catalog from decoded JSON, dropping entries without word text."""
    records = []
    for index, item in enumerate(items):
        record = parse_record(item, alien_category)
        if record is None:
            logger.warning(f"Skipping catalog entry {index}: missing word text")
            continue
        if record.level is None or record.week is None:
            logger.debug(f"Catalog entry {record.word!r} has no usable level/week")
        records.append(record)
    return Catalog(records)


class CatalogService:
    """Loads the word catalog from a JSON file."""

    def __init__(self, path: Optional[Union[str, Path]] = None, alien_category: Optional[str] = None):
        """Initialize the service with the catalog location."""
        self.path = Path(path) if path is not None else settings.paths.catalog_file
        self.alien_category = alien_category or settings.drill.alien_category

    def fetch_catalog(self) -> Catalog:
        """Read and parse the catalog, raising CatalogLoadError on any failure."""
        try:
            with self.path.open("r", encoding="utf-8") as handle:
                data = json.load(handle)
        except OSError as e:
            raise CatalogLoadError(f"Failed to read catalog {self.path}: {e}") from e
        except json.JSONDecodeError as e:
            raise CatalogLoadError(f"Failed to parse catalog {self.path}: {e}") from e

        if not isinstance(data, list):
            raise CatalogLoadError(f"Invalid catalog {self.path}: expected a list of words")

        catalog = parse_catalog(data, self.alien_category)
        monitoring.catalog_words.set(len(catalog))
        logger.info(f"Loaded {len(catalog)} words from {self.path}")
        return catalog
