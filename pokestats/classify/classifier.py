"""
Bucket assignment.

`classify` runs every entry through every rule of the catalogue and
collects the matches per rule.  Rules are independent: an entry may
land in several buckets (a Paldean Tauros breed is both a Paldean
form and a Tauros form), and the order of the rules only decides the
order of the output sections.

`base_bucket` is the complement of the catalogue: entries claimed by
no rule.  Using the same rule objects for both sides keeps the base
table and the form tables from drifting apart.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Sequence

from ..normalize.schema import Entry
from ..settings import BASE_TABLE_NAME, PLACEHOLDER_NAME
from .rules import CategoryRule

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LabeledEntry:
    entry: Entry
    label: str


@dataclass
class Bucket:
    """One output array: its identifier and the labelled members."""

    name: str
    title: str = ""
    members: List[LabeledEntry] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.members)

    @property
    def ids(self) -> List[int]:
        return [m.entry.id for m in self.members]


def is_special_form(entry: Entry, rules: Iterable[CategoryRule]) -> bool:
    """True if any catalogue rule claims the entry."""
    return any(rule.matches(entry.name) for rule in rules)


def base_bucket(entries: Sequence[Entry], rules: Sequence[CategoryRule]) -> Bucket:
    """Collect the entries that no rule matches, labelled with their full name."""
    bucket = Bucket(name=BASE_TABLE_NAME, title="Base forms")
    for entry in entries:
        if is_special_form(entry, rules):
            continue
        label = PLACEHOLDER_NAME if entry.is_placeholder else entry.name.strip()
        bucket.members.append(LabeledEntry(entry, label))
    logger.debug("%s: %d entries", bucket.name, len(bucket))
    return bucket


def classify(entries: Sequence[Entry], rules: Sequence[CategoryRule]) -> List[Bucket]:
    """Return one bucket per rule, in rule order.

    Members keep the order of ``entries``.
    """
    buckets: List[Bucket] = []
    for rule in rules:
        bucket = Bucket(name=rule.name, title=rule.title)
        for entry in entries:
            if rule.matches(entry.name):
                bucket.members.append(LabeledEntry(entry, rule.label_for(entry)))
        logger.debug("%s (%s): %d entries", rule.name, rule.title, len(bucket))
        buckets.append(bucket)
    return buckets
