"""
Fixed run settings.

The exporter is not configurable at run time: the source page, the
client identifier and the output file are constants of the tool.
"""

from __future__ import annotations

SOURCE_URL = "https://pokemondb.net/pokedex/all"
USER_AGENT = "Mozilla/5.0 (compatible; PokemonStatsExporter/1.0)"
REQUEST_TIMEOUT_SECONDS = 30
OUTPUT_PATH = "PokemonBaseStatsArray.txt"

# Structural address of the listing table.
TABLE_ID = "pokedex"
MIN_ROW_CELLS = 10
STAT_COLUMNS = range(4, 10)

PLACEHOLDER_NAME = "(placeholder)"
BASE_TABLE_NAME = "BASE_STATS_TABLE"
