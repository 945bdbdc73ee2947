"""
Domain service: multi-year economic projection from editable cost tables.
"""
from typing import Dict, Mapping, Optional, Sequence, Tuple
import logging

from forest_planner.domain.models import EconomicState, SpeciesRecord
from forest_planner.infrastructure.species_catalog import SpeciesCatalog
from forest_planner.services.domain.scoring_engine import annual_income

logger = logging.getLogger(__name__)


class EconomicProjector:
    """
    Projects income, net profit and ROI of a plan over the forest age.

    Income is re-resolved against the catalog when one is supplied, so
    plants whose species has left the catalog contribute nothing.
    """

    def __init__(self, catalog: Optional[SpeciesCatalog] = None):
        self.catalog = catalog

    def project_income(
        self,
        placed: Sequence[SpeciesRecord],
        forest_age: float,
    ) -> Dict[str, float]:
        """
        Yearly income per species name at *forest_age*.

        Args:
            placed: All placed plant instances
            forest_age: Age of the forest in years

        Returns:
            Mapping of species name to summed yearly income of its instances
        """
        income: Dict[str, float] = {}
        skipped = 0

        for plant in placed:
            species = plant
            if self.catalog is not None:
                species = self.catalog.get(plant.id)
                if species is None:
                    skipped += 1
                    continue
            income[species.name] = income.get(species.name, 0.0) + annual_income(species, forest_age)

        if skipped:
            logger.debug(f"Skipped {skipped} plants missing from the catalog")

        return income

    def project_profit(
        self,
        income: Mapping[str, float],
        setup_costs: Mapping[str, float],
        annual_costs: Mapping[str, float],
        forest_age: float,
    ) -> Tuple[float, float]:
        """
        Net profit and ROI over *forest_age* years.

        Args:
            income: Yearly income per species
            setup_costs: One-off costs by name
            annual_costs: Yearly costs by name
            forest_age: Age of the forest in years

        Returns:
            Tuple of (net_profit, roi_percent). ROI is 0 when total costs are not positive.
        """
        total_income = sum(income.values())
        total_setup = sum(setup_costs.values())
        total_annual = sum(annual_costs.values())

        net_profit = (total_income - total_annual) * forest_age - total_setup

        total_costs = total_setup + total_annual * forest_age
        roi = net_profit / total_costs * 100 if total_costs > 0 else 0.0

        return net_profit, roi

    def project(
        self,
        placed: Sequence[SpeciesRecord],
        setup_costs: Mapping[str, float],
        annual_costs: Mapping[str, float],
        forest_age: float,
    ) -> EconomicState:
        """
        Full economic state of a plan.

        Args:
            placed: All placed plant instances
            setup_costs: One-off costs by name
            annual_costs: Yearly costs by name
            forest_age: Age of the forest in years

        Returns:
            EconomicState
        """
        income = self.project_income(placed, forest_age)
        net_profit, roi = self.project_profit(income, setup_costs, annual_costs, forest_age)

        return EconomicState(
            setup_costs=dict(setup_costs),
            annual_costs=dict(annual_costs),
            income_by_species=income,
            total_income=sum(income.values()),
            net_profit=net_profit,
            roi=roi,
        )
