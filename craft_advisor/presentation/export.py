"""
CSV Export

Writes the current recommendations to a timestamped CSV file.
"""

import csv
import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Union

from ..domain.crafting.models import Recommendation

logger = logging.getLogger(__name__)

CSV_HEADER = ["Item Name", "Profitability", "Material Locations"]


def export_filename(now: Optional[datetime] = None) -> str:
    now = now or datetime.now()
    return f"craft_recommendations_{now:%Y%m%d_%H%M%S}.csv"


def export_csv(
    recommendations: List[Recommendation],
    directory: Union[str, Path] = ".",
    now: Optional[datetime] = None
) -> Path:
    """
    Write one row per recommendation.

    Location ids of all materials are pipe-joined, without duplicates.

    Returns:
        Path of the written file
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / export_filename(now)

    with open(path, "w", newline="", encoding="utf-8") as fh:
        writer = csv.writer(fh)
        writer.writerow(CSV_HEADER)
        for rec in recommendations:
            locations: List[int] = []
            for held_at in rec.material_locations.values():
                for location_id in held_at:
                    if location_id not in locations:
                        locations.append(location_id)
            writer.writerow([
                rec.name,
                rec.profitability,
                "|".join(str(location_id) for location_id in locations)
            ])

    logger.info(f"Exported {len(recommendations)} recommendations to {path}")
    return path
