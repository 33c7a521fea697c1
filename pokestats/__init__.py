"""
Pokestats package: base stats table exporter.

This package downloads the National Pokédex listing from pokemondb.net
and turns it into a static C++ source fragment of `BaseStats` arrays.
The work is split into small stages that mirror the data flow:

1. **collect** – Download the raw HTML of the listing page with a
   descriptive User-Agent.  One request, no retries, no cache.
2. **normalize** – Locate the `#pokedex` table, convert each row into
   an immutable `Entry` and canonicalise the display names.  Rows that
   are not data rows are skipped silently.
3. **classify** – Evaluate every entry against a declarative catalogue
   of form rules (mega evolutions, regional variants, species specific
   formes) and derive a short label for each match.  Everything that
   no rule claims ends up in the base table.
4. **emit** – Render each bucket as a fixed-width array literal with a
   provenance comment per line and write the document to disk.
5. **cli** – Entry point wiring the stages together.
"""

__version__ = "1.0.0"
