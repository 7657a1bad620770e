"""Guideline source loading from CSV or JSON files.

Sources are parsed entry by entry. A malformed entry is logged and dropped
without aborting the rest of the load; an unreadable source yields a
``LoadResult`` with ``source_available=False`` instead of raising.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

import pandas as pd
from pydantic import ValidationError

from pricing_engine.core.enums import GuidelineFormat
from pricing_engine.models.domain.guideline import Clause, Guideline
from pricing_engine.models.schemas.guideline import RuleDefinition

logger = logging.getLogger(__name__)

# Column names used by the Salesforce guideline export
STATE_COLUMN = "State__c"
TEXT_COLUMN = "Guideline_Text__c"
RULE_JSON_COLUMN = "Rule_JSON__c"
ID_COLUMNS = ("Rule_Id__c", "Id", "Name")

GuidelinesByState = Dict[str, List[Guideline]]


class MalformedClauseDataError(ValueError):
    """A guideline entry's conditions or requirements could not be parsed."""


@dataclass(frozen=True)
class ParseResult:
    """
    Outcome of parsing one source entry.

    Exactly one of ``guideline`` and ``error`` is set.
    """

    guideline: Optional[Guideline] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.guideline is not None


@dataclass
class LoadResult:
    """
    Outcome of loading a guideline source.

    Attributes:
        source_available: False if the source could not be read at all
        guidelines: Guidelines grouped by uppercased state, in load order
        skipped: Number of entries dropped as malformed
        error: Description of the failure when the source was unavailable
    """

    source_available: bool
    guidelines: GuidelinesByState = field(default_factory=dict)
    skipped: int = 0
    error: Optional[str] = None

    @property
    def state_count(self) -> int:
        return len(self.guidelines)

    @property
    def rule_count(self) -> int:
        return sum(len(rules) for rules in self.guidelines.values())


def normalize_state(state: Any) -> str:
    """Normalize a state code to its stripped, uppercased form."""
    if state is None:
        return ""
    return str(state).strip().upper()


def _build_clauses(definition: RuleDefinition) -> Tuple[Tuple[Clause, ...], Tuple[Clause, ...]]:
    conditions = tuple(
        Clause(field=c.field, operator=c.operator, value=c.value)
        for c in definition.conditions
    )
    requirements = tuple(
        Clause(field=c.field, operator=c.operator, value=c.value)
        for c in definition.requirements
    )
    return conditions, requirements


def parse_rule_definition(raw: Union[str, Dict[str, Any], None]) -> RuleDefinition:
    """
    Parse the embedded conditions/requirements structure of an entry.

    Args:
        raw: JSON text or an already decoded mapping; blank means no clauses

    Returns:
        Validated RuleDefinition

    Raises:
        MalformedClauseDataError: If the structure cannot be parsed
    """
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return RuleDefinition()

    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError as e:
            raise MalformedClauseDataError(f"Invalid rule JSON: {e.msg}") from e

    try:
        return RuleDefinition.model_validate(raw)
    except ValidationError as e:
        raise MalformedClauseDataError(
            f"Invalid rule structure: {e.error_count()} validation error(s)"
        ) from e


def parse_entry(
    state: str,
    text: Any,
    rule_id: Any,
    rule_json: Union[str, Dict[str, Any], None],
) -> ParseResult:
    """
    Parse one guideline entry into a Guideline.

    Args:
        state: Normalized state code
        text: Guideline text
        rule_id: Source identifier, may be blank
        rule_json: Embedded conditions/requirements

    Returns:
        ParseResult holding either the guideline or the parse error
    """
    try:
        definition = parse_rule_definition(rule_json)
    except MalformedClauseDataError as e:
        return ParseResult(error=str(e))

    conditions, requirements = _build_clauses(definition)
    identifier = str(rule_id).strip() if rule_id not in (None, "") else None
    return ParseResult(
        guideline=Guideline(
            id=identifier or None,
            text="" if text is None else str(text),
            state=state,
            conditions=conditions,
            requirements=requirements,
        )
    )


class GuidelineLoader:
    """
    Loader for guideline source files.

    Builds a fresh state-to-guidelines mapping on every call to ``load``;
    it never touches a store directly.
    """

    def __init__(self, path: Union[str, Path], source_format: Optional[str] = None):
        """
        Initialize the loader.

        Args:
            path: Path to the CSV or JSON source
            source_format: "csv" or "json"; detected from the suffix when empty
        """
        self.path = Path(path)
        self.source_format = self._resolve_format(self.path, source_format)

    @staticmethod
    def _resolve_format(path: Path, source_format: Optional[str]) -> GuidelineFormat:
        if source_format and source_format.strip():
            try:
                return GuidelineFormat(source_format.strip().lower())
            except ValueError:
                logger.warning(
                    f"Unknown guideline format {source_format!r}; detecting from {path.name}"
                )
        if path.suffix.lower() == ".json":
            return GuidelineFormat.JSON
        return GuidelineFormat.CSV

    def load(self) -> LoadResult:
        """
        Load all guidelines from the source.

        Returns:
            LoadResult with the guidelines grouped by state
        """
        logger.info(f"Loading pricing guidelines from {self.path} ({self.source_format.value})")

        try:
            if self.source_format == GuidelineFormat.JSON:
                entries = list(self._read_json())
            else:
                entries = list(self._read_csv())
        except (OSError, ValueError, pd.errors.ParserError) as e:
            logger.error(f"Guideline source unavailable: {self.path}: {e}")
            return LoadResult(source_available=False, error=str(e))

        guidelines: GuidelinesByState = {}
        skipped = 0
        for position, (state, text, rule_id, rule_json) in enumerate(entries, start=1):
            if not state:
                continue

            result = parse_entry(state, text, rule_id, rule_json)
            if not result.ok:
                skipped += 1
                logger.warning(f"Skipping guideline entry {position} for {state}: {result.error}")
                continue

            guidelines.setdefault(state, []).append(result.guideline)

        load_result = LoadResult(source_available=True, guidelines=guidelines, skipped=skipped)
        logger.info(
            f"Loaded {load_result.rule_count} pricing guidelines for "
            f"{load_result.state_count} states ({skipped} skipped)"
        )
        return load_result

    def _read_csv(self) -> Iterator[Tuple[str, Any, Any, Any]]:
        try:
            frame = pd.read_csv(self.path, dtype=str, keep_default_na=False)
        except pd.errors.EmptyDataError:
            return

        frame.columns = [str(column).strip() for column in frame.columns]
        id_column = next((c for c in ID_COLUMNS if c in frame.columns), None)

        for row in frame.to_dict(orient="records"):
            yield (
                normalize_state(row.get(STATE_COLUMN)),
                row.get(TEXT_COLUMN, ""),
                row.get(id_column) if id_column else None,
                row.get(RULE_JSON_COLUMN),
            )

    def _read_json(self) -> Iterator[Tuple[str, Any, Any, Any]]:
        with self.path.open(encoding="utf-8") as f:
            payload = json.load(f)

        if isinstance(payload, dict):
            items = [
                (state, entry)
                for state, state_entries in payload.items()
                for entry in (state_entries if isinstance(state_entries, list) else [state_entries])
            ]
        elif isinstance(payload, list):
            items = [
                (entry.get("state") if isinstance(entry, dict) else None, entry)
                for entry in payload
            ]
        else:
            raise ValueError("Guideline JSON must be an object keyed by state or a list")

        for state, entry in items:
            state = normalize_state(state)
            if not isinstance(entry, dict):
                # Counted as a malformed entry
                yield state, None, None, "<not an object>"
                continue

            rule_json = entry.get("rule", entry.get("json"))
            if rule_json is None:
                rule_json = {
                    "conditions": entry.get("conditions", []),
                    "requirements": entry.get("requirements", []),
                }
            yield (
                state,
                entry.get("text", entry.get("guideline", "")),
                entry.get("id", entry.get("ruleId")),
                rule_json,
            )
