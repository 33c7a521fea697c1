"""
Classification subsystem for the exporter.

The `classify` package sorts parsed entries into named buckets.  The
rules are data (`catalogue.yaml`); `rules.py` loads and validates
them and implements the label strategies, `classifier.py` applies
them to the entry list.
"""

from .rules import CategoryRule, LabelSpec, load_catalogue  # noqa: F401
from .classifier import Bucket, LabeledEntry, base_bucket, classify  # noqa: F401
