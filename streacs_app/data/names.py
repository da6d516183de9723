"""
Country name normalization between the world map and the datasets.

The world-atlas topology labels some countries differently from the market
structure and VRE datasets. The alias table has three outcomes:

- label not in the table: passes through unchanged
- label mapped to a name: use the mapped name
- label mapped to None: territory has no data and must not be looked up
"""

from types import MappingProxyType
from typing import Mapping, Optional

NAME_ALIASES: Mapping[str, Optional[str]] = MappingProxyType({
    "United States of America": "United States",
    "USA": "United States",
    "Czechia": "Czech Republic",
    "Czech Rep.": "Czech Republic",
    "Bosnia and Herz.": "Bosnia and Herzegovina",
    "Bosnia-Herzegovina": "Bosnia and Herzegovina",
    "North Macedonia": "Republic of North Macedonia",
    "Macedonia": "Republic of North Macedonia",
    "Turkey": "Turkiye",
    "Dem. Rep. Congo": "Democratic Republic of the Congo",
    "Democratic Republic of Congo": "Democratic Republic of the Congo",
    "Congo": "Congo",
    "Republic of Congo": "Congo",
    "Republic of the Congo": "Congo",
    "Côte d'Ivoire": "Ivory Coast",
    "CÃ´te d'Ivoire": "Ivory Coast",  # UTF-8 read as Latin-1
    "Cote d'Ivoire": "Ivory Coast",
    "Dominican Rep.": "Dominican Republic",
    "Eq. Guinea": "Equatorial Guinea",
    "Central African Rep.": "Central African Republic",
    "S. Sudan": "South Sudan",
    "Solomon Is.": "Solomon Islands",
    "Lao PDR": "Laos",
    "Timor-Leste": "Timor Leste",
    "eSwatini": "Eswatini (Swaziland)",
    "W. Sahara": "Western Sahara",
    "Antarctica": None,
    "Somaliland": None,
})


class NameNormalizer:
    """Maps world map labels onto dataset country names."""

    def __init__(self, aliases: Optional[Mapping[str, Optional[str]]] = None):
        self.aliases = NAME_ALIASES if aliases is None else aliases

    def normalize(self, label: str) -> Optional[str]:
        """
        Canonical dataset name for a map label.

        Returns:
            The aliased name, the label unchanged when it has no alias, or
            None when the territory is excluded from data lookups
        """
        if label in self.aliases:
            return self.aliases[label]
        return label

    def is_excluded(self, label: str) -> bool:
        """True if the label is explicitly mapped to no dataset country."""
        return label in self.aliases and self.aliases[label] is None

    def has_alias(self, label: str) -> bool:
        return label in self.aliases
