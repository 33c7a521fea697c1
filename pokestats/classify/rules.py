"""
Category rules and label derivation.

A `CategoryRule` describes one output array: the substrings that put
an entry into it, the substrings that keep an entry out of it, and
how the short label printed in each line's comment is derived from
the entry name.  Rules are plain data; the reference set lives in
`catalogue.yaml` next to this module and is read by
`load_catalogue`.

Label strategies are total functions of the name: a token that does
not occur yields an empty string rather than an exception.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

import yaml  # type: ignore

from ..errors import CatalogueError
from ..normalize.schema import Entry
from ..settings import PLACEHOLDER_NAME

logger = logging.getLogger(__name__)

CATALOGUE_PATH = Path(__file__).with_name("catalogue.yaml")


@dataclass(frozen=True)
class LabelSpec:
    """Label derivation strategy plus its parameters."""

    strategy: str = "verbatim"
    token: str = ""
    prefix: str = ""
    text: str = ""
    options: Tuple[Tuple[str, str], ...] = ()

    def derive(self, name: str) -> str:
        return STRATEGIES[self.strategy](self, name)


def split_after(name: str, token: str) -> str:
    """Text after the first occurrence of ``token``, trimmed."""
    idx = name.find(token) if token else -1
    if idx < 0:
        return ""
    return name[idx + len(token):].strip()


def split_before(name: str, token: str) -> str:
    """Text before the first occurrence of ``token``, trimmed."""
    idx = name.find(token) if token else -1
    if idx < 0:
        return ""
    return name[:idx].strip()


def _choice(spec: LabelSpec, name: str) -> str:
    for marker, label in spec.options:
        if marker in name:
            return label
    return ""


STRATEGIES: Dict[str, Callable[[LabelSpec, str], str]] = {
    "split_after": lambda spec, name: split_after(name, spec.token),
    "split_before": lambda spec, name: split_before(name, spec.token),
    "strip_prefix": lambda spec, name: name.replace(spec.token, "").strip(),
    "verbatim": lambda spec, name: name.strip(),
    "literal": lambda spec, name: spec.text,
    "synthesized": lambda spec, name: spec.prefix + split_after(name, spec.token),
    "choice": _choice,
}

# Parameters each strategy needs from the catalogue.
REQUIRED_PARAMS: Dict[str, Tuple[str, ...]] = {
    "split_after": ("token",),
    "split_before": ("token",),
    "strip_prefix": ("token",),
    "verbatim": (),
    "literal": ("text",),
    "synthesized": ("prefix", "token"),
    "choice": ("options",),
}


@dataclass(frozen=True)
class CategoryRule:
    name: str
    title: str
    match: Tuple[str, ...]
    exclude: Tuple[str, ...] = ()
    label: LabelSpec = LabelSpec()

    def matches(self, name: str) -> bool:
        if not any(marker in name for marker in self.match):
            return False
        return not any(marker in name for marker in self.exclude)

    def label_for(self, entry: Entry) -> str:
        if entry.is_placeholder:
            return PLACEHOLDER_NAME
        return self.label.derive(entry.name)


def _string_list(value: object, field: str, rule_name: str) -> Tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, list) or not all(isinstance(v, str) and v for v in value):
        raise CatalogueError(f"{rule_name}: '{field}' must be a list of non-empty strings")
    return tuple(value)


def _label_spec(raw: object, rule_name: str) -> LabelSpec:
    if raw is None:
        return LabelSpec()
    if isinstance(raw, str):
        raw = {"strategy": raw}
    if not isinstance(raw, dict):
        raise CatalogueError(f"{rule_name}: 'label' must be a mapping or strategy name")
    strategy = raw.get("strategy", "verbatim")
    if strategy not in STRATEGIES:
        raise CatalogueError(f"{rule_name}: unknown label strategy {strategy!r}")
    missing = [p for p in REQUIRED_PARAMS[strategy] if p not in raw]
    if missing:
        raise CatalogueError(f"{rule_name}: strategy {strategy!r} needs {', '.join(missing)}")
    options: List[Tuple[str, str]] = []
    for pair in raw.get("options") or []:
        if not (isinstance(pair, list) and len(pair) == 2 and all(isinstance(p, str) for p in pair)):
            raise CatalogueError(f"{rule_name}: choice options must be [marker, label] pairs")
        options.append((pair[0], pair[1]))
    return LabelSpec(
        strategy=strategy,
        token=str(raw.get("token", "")),
        prefix=str(raw.get("prefix", "")),
        text=str(raw.get("text", "")),
        options=tuple(options),
    )


def parse_catalogue(data: object) -> List[CategoryRule]:
    """Validate a decoded catalogue document into rules.

    The document is a mapping with a ``rules`` list.  Each rule has a
    ``name``, an optional ``title``, a non-empty ``match`` list, an
    optional ``exclude`` list and an optional ``label`` block.
    """
    if not isinstance(data, dict) or not isinstance(data.get("rules"), list):
        raise CatalogueError("catalogue must be a mapping with a 'rules' list")
    rules: List[CategoryRule] = []
    seen = set()
    for raw in data["rules"]:
        if not isinstance(raw, dict) or not isinstance(raw.get("name"), str):
            raise CatalogueError(f"rule without a name: {raw!r}")
        name = raw["name"]
        if name in seen:
            raise CatalogueError(f"duplicate rule name {name}")
        seen.add(name)
        match = _string_list(raw.get("match"), "match", name)
        if not match:
            raise CatalogueError(f"{name}: 'match' must not be empty")
        rules.append(
            CategoryRule(
                name=name,
                title=str(raw.get("title", name)),
                match=match,
                exclude=_string_list(raw.get("exclude"), "exclude", name),
                label=_label_spec(raw.get("label"), name),
            )
        )
    return rules


def load_catalogue(path: Optional[Path] = None) -> List[CategoryRule]:
    """Load the rule catalogue from YAML (the bundled one by default)."""
    path = path or CATALOGUE_PATH
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise CatalogueError(f"{path}: invalid YAML: {exc}") from exc
    rules = parse_catalogue(data)
    logger.debug("Loaded %d category rules from %s", len(rules), path)
    return rules
