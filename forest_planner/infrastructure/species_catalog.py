"""
Infrastructure layer: read-only access to the species catalog.
"""
import logging
from typing import Dict, Iterable, List, Optional

from forest_planner.domain.models import Climate, Layer, SpeciesRecord
from forest_planner.infrastructure.catalog_data import plant_database

logger = logging.getLogger(__name__)


class SpeciesNotFoundError(LookupError):
    """Raised when a species id is not present in the catalog."""

    def __init__(self, species_id: int):
        self.species_id = species_id
        super().__init__(f"Species with ID '{species_id}' not found in catalog")


class SpeciesCatalog:
    """
    Lookup over an externally supplied list of species records.

    The catalog never changes after construction.
    """

    def __init__(self, records: Iterable[SpeciesRecord]):
        self._records: List[SpeciesRecord] = list(records)
        self._by_id: Dict[int, SpeciesRecord] = {r.id: r for r in self._records}
        if len(self._by_id) != len(self._records):
            raise ValueError("Species catalog contains duplicate ids")

    @classmethod
    def from_dicts(cls, rows: Iterable[dict]) -> "SpeciesCatalog":
        """
        Build a catalog from raw dictionaries.

        Args:
            rows: Mappings with the SpeciesRecord fields

        Returns:
            SpeciesCatalog instance
        """
        return cls(SpeciesRecord(**row) for row in rows)

    def all(self) -> List[SpeciesRecord]:
        return list(self._records)

    def get(self, species_id: int) -> Optional[SpeciesRecord]:
        return self._by_id.get(species_id)

    def require(self, species_id: int) -> SpeciesRecord:
        """
        Fetch a species by id.

        Raises:
            SpeciesNotFoundError: If no species has this id
        """
        species = self._by_id.get(species_id)
        if species is None:
            raise SpeciesNotFoundError(species_id)
        return species

    def find_by_name(self, name: str) -> Optional[SpeciesRecord]:
        return next((r for r in self._records if r.name == name), None)

    def filter(
        self,
        climate: Optional[Climate] = None,
        search: Optional[str] = None,
        layer: Optional[Layer] = None,
    ) -> List[SpeciesRecord]:
        """
        Filter the catalog the way the species palette does.

        Args:
            climate: Only species of this climate zone
            search: Case-insensitive substring of the species name
            layer: Only species of this vertical layer

        Returns:
            Matching species in catalog order
        """
        term = search.lower() if search else None
        return [
            r for r in self._records
            if (climate is None or r.climate == climate)
            and (term is None or term in r.name.lower())
            and (layer is None or r.layer == layer)
        ]

    def __len__(self) -> int:
        return len(self._records)


# Singleton instance
_catalog: Optional[SpeciesCatalog] = None


def get_species_catalog() -> SpeciesCatalog:
    """
    Get or create the singleton catalog loaded from the bundled data.

    Returns:
        SpeciesCatalog instance
    """
    global _catalog
    if _catalog is None:
        _catalog = SpeciesCatalog.from_dicts(plant_database)
        logger.info(f"Loaded species catalog with {len(_catalog)} species")
    return _catalog
