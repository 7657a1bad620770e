"""Guideline service for loading and reloading the guideline store."""

import logging
from dataclasses import dataclass
from typing import Optional

from pricing_engine.services.guideline_loader import GuidelineLoader
from pricing_engine.services.guideline_store import GuidelineStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReloadSummary:
    """
    Outcome of a guideline (re)load.

    Attributes:
        success: Whether the source was read
        states: Number of states loaded from the source
        rules: Number of guidelines loaded from the source
        skipped: Malformed entries dropped during the load
        message: Failure description when the source was unavailable
    """

    success: bool
    states: int
    rules: int
    skipped: int = 0
    message: Optional[str] = None


class GuidelineService:
    """
    Guideline service coordinating the loader with the store.

    This service:
    - Runs the loader into an isolated mapping
    - Swaps the store snapshot only after a complete load
    - Applies the configured policy when the source is unavailable
    """

    def __init__(
        self,
        loader: GuidelineLoader,
        store: Optional[GuidelineStore] = None,
        clear_on_failure: bool = False,
    ):
        """
        Initialize the guideline service.

        Args:
            loader: Loader for the guideline source
            store: Store to populate (a new empty store if not provided)
            clear_on_failure: Empty the store when the source is unavailable
                instead of keeping the previous snapshot
        """
        self.loader = loader
        self.store = store or GuidelineStore()
        self.clear_on_failure = clear_on_failure

    def reload(self) -> ReloadSummary:
        """
        Reload guidelines from the source.

        Never raises for source problems; failures are reported through
        ``ReloadSummary.success`` and the resulting store counts.

        Returns:
            ReloadSummary with the loaded counts (zero when the source is unavailable)
        """
        result = self.loader.load()

        if not result.source_available:
            if self.clear_on_failure:
                self.store.clear()
                logger.warning("Guideline source unavailable; guideline store cleared")
            else:
                logger.warning(
                    f"Guideline source unavailable; keeping {self.store.rule_count} "
                    f"previously loaded guidelines"
                )
            return ReloadSummary(
                success=False,
                states=0,
                rules=0,
                message=result.error,
            )

        self.store.replace(result.guidelines)
        return ReloadSummary(
            success=True,
            states=result.state_count,
            rules=result.rule_count,
            skipped=result.skipped,
        )
