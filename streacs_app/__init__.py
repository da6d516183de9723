"""
STREACS App - Electricity Market Liberalization Data Layer

Loads, indexes and queries the datasets behind the STREACS dashboard:
wholesale market structure codes (1989-2024), sector regulators, IPP entry,
solar and wind penetration series and world map boundaries, plus simple
linear VRE projection scenarios.
"""

__version__ = "0.1.0"
__author__ = "STREACS Team"
