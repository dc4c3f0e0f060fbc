"""HTF/LTF timeframe alignment validation"""

from typing import Mapping, Optional

from ..config.defaults import TimeframeParams
from ..errors import ReferenceDataError, UnknownTimeframeError
from ..models.metrics import AlignmentClassification, AlignmentResult, TimeframeType


class TimeframeAlignmentValidator:
    """
    Validates that an entry timeframe is a sensible subordinate of the
    analysis timeframe used for top-down analysis.

    A pair is aligned when the entry rank is strictly below the analysis rank
    and not below the analysis timeframe's entry threshold. Labels outside
    the rank table are rejected rather than guessed at.
    """

    def __init__(self, ranks: Optional[Mapping[str, int]] = None,
                 entry_thresholds: Optional[Mapping[str, str]] = None,
                 aliases: Optional[Mapping[str, str]] = None,
                 htf_min_rank: Optional[int] = None):
        defaults = TimeframeParams()
        self.ranks = dict(ranks if ranks is not None else defaults.ranks)
        self.entry_thresholds = dict(
            entry_thresholds if entry_thresholds is not None else defaults.entry_thresholds
        )
        alias_table = aliases if aliases is not None else defaults.aliases
        self.htf_min_rank = htf_min_rank if htf_min_rank is not None else defaults.htf_min_rank

        # Canonical labels always resolve to themselves
        self._aliases = {label.upper(): label for label in self.ranks}
        self._aliases.update({alias.upper(): label for alias, label in alias_table.items()})

        self._check_thresholds()

    @classmethod
    def from_params(cls, params: TimeframeParams) -> "TimeframeAlignmentValidator":
        return cls(params.ranks, params.entry_thresholds, params.aliases, params.htf_min_rank)

    def _check_thresholds(self) -> None:
        """Every threshold must itself be a legal entry for its analysis timeframe."""
        for analysis, threshold in self.entry_thresholds.items():
            if analysis not in self.ranks or threshold not in self.ranks:
                raise ReferenceDataError(
                    f"Threshold {analysis} -> {threshold} references an unranked timeframe"
                )
            if self.ranks[threshold] >= self.ranks[analysis]:
                raise ReferenceDataError(
                    f"Threshold {threshold} must be finer than analysis timeframe {analysis}"
                )
        for alias, label in self._aliases.items():
            if label not in self.ranks:
                raise ReferenceDataError(f"Alias {alias} points at unranked timeframe {label}")

    def normalize(self, label: str, field: str = "timeframe") -> str:
        """
        Resolve a journal label to its canonical rank-table name.

        Raises:
            UnknownTimeframeError: If the label is not recognised
        """
        canonical = self._aliases.get(str(label).strip().upper())
        if canonical is None:
            raise UnknownTimeframeError(
                f"Unknown timeframe: {label!r}",
                label=label,
                field=field
            )
        return canonical

    def rank(self, label: str) -> int:
        return self.ranks[self.normalize(label)]

    def recommended_entry_timeframe(self, analysis_timeframe: str) -> Optional[str]:
        """
        Finest entry timeframe still aligned with ``analysis_timeframe``.

        Returns:
            Threshold label, or None for a ranked timeframe with nothing
            finer to enter on (M1 with the default tables)

        Raises:
            UnknownTimeframeError: If the label is not in the rank table
        """
        analysis = self.normalize(analysis_timeframe, field="analysis_timeframe")
        return self.entry_thresholds.get(analysis)

    def validate(self, analysis_timeframe: str, entry_timeframe: str) -> AlignmentResult:
        """
        Check an analysis/entry timeframe pair.

        Args:
            analysis_timeframe: Higher timeframe label (e.g. "Daily", "D1")
            entry_timeframe: Lower timeframe label (e.g. "M15", "15m")

        Returns:
            AlignmentResult; ``recommended_max_entry_timeframe`` is a hint only
            and is None when the analysis timeframe has no threshold, in
            which case no entry is aligned

        Raises:
            UnknownTimeframeError: If either label is not in the rank table
        """
        analysis = self.normalize(analysis_timeframe, field="analysis_timeframe")
        entry = self.normalize(entry_timeframe, field="entry_timeframe")
        recommended = self.recommended_entry_timeframe(analysis)

        analysis_rank = self.ranks[analysis]
        entry_rank = self.ranks[entry]
        # No threshold: every finer entry is too granular
        threshold_rank = self.ranks[recommended] if recommended is not None else analysis_rank

        if entry_rank == analysis_rank:
            classification = AlignmentClassification.SAME_TIMEFRAME
        elif entry_rank > analysis_rank:
            classification = AlignmentClassification.INVERTED
        elif entry_rank < threshold_rank:
            classification = AlignmentClassification.TOO_GRANULAR
        else:
            classification = AlignmentClassification.TOP_DOWN

        return AlignmentResult(
            valid=classification == AlignmentClassification.TOP_DOWN,
            recommended_max_entry_timeframe=recommended,
            classification=classification,
            analysis_timeframe=analysis,
            entry_timeframe=entry,
        )

    def classify_timeframe(self, label: str) -> TimeframeType:
        """HTF for H4 and coarser, LTF below."""
        return TimeframeType.HTF if self.rank(label) >= self.htf_min_rank else TimeframeType.LTF
