"""
Per-exercise mastery tracking.

A ProgressStore belongs to one study session and is handed to whatever needs
it; there is no process-wide instance. Mastery is monotonic: once an
exercise has been answered correctly it stays mastered, and later wrong
attempts only bump the attempt count.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from proofmaster.catalog import Exercise, ExerciseCatalog

logger = logging.getLogger(__name__)

UNMASTERED_PREVIEW = 4


class MasteryRecord(BaseModel):
    """Mastery state of one exercise"""
    model_config = ConfigDict(frozen=True)

    correct: bool = False
    attempts: int = Field(default=0, ge=0)


class Aggregate(BaseModel):
    """Completed/total counts over a set of exercises"""
    model_config = ConfigDict(frozen=True)

    completed: int
    total: int
    percentage: int


class PartProgress(BaseModel):
    part: str
    aggregate: Aggregate


class SectionProgress(BaseModel):
    """Progress for one section, broken down by part"""
    section: str
    title: str
    aggregate: Aggregate
    parts: list[PartProgress] = Field(default_factory=list)
    unmastered_preview: list[str] = Field(default_factory=list)
    unmastered_remaining: int = 0


def percentage(completed: int, total: int) -> int:
    """round(100 * completed / total), or 0 for an empty set."""
    if total == 0:
        return 0
    return round(100 * completed / total)


class ProgressStore:
    """
    Mapping from exercise id to MasteryRecord.

    Any id is accepted, including ids the catalog does not know; such
    records simply never show up in catalog aggregates.
    """

    def __init__(self):
        self._records: dict[str, MasteryRecord] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._records)

    def record(self, exercise_id: str, was_correct: bool) -> MasteryRecord:
        """
        Record one attempt.

        Args:
            exercise_id: Stored exercise id (remixes record under the same id)
            was_correct: Outcome of this attempt

        Returns:
            The updated record
        """
        with self._lock:
            previous = self._records.get(exercise_id, MasteryRecord())
            updated = MasteryRecord(
                correct=was_correct or previous.correct,
                attempts=previous.attempts + 1,
            )
            self._records[exercise_id] = updated
        logger.debug(
            "recorded %s correct=%s attempts=%d",
            exercise_id, updated.correct, updated.attempts,
        )
        return updated

    def query(self, exercise_id: str) -> Optional[MasteryRecord]:
        return self._records.get(exercise_id)

    def is_mastered(self, exercise_id: str) -> bool:
        record = self._records.get(exercise_id)
        return record is not None and record.correct

    def snapshot(self) -> dict[str, MasteryRecord]:
        with self._lock:
            return dict(self._records)

    def _aggregate(self, exercises: list["Exercise"]) -> Aggregate:
        completed = sum(1 for e in exercises if self.is_mastered(e.id))
        return Aggregate(
            completed=completed,
            total=len(exercises),
            percentage=percentage(completed, len(exercises)),
        )

    def aggregate_for(
        self,
        catalog: "ExerciseCatalog",
        section_key: str,
        part_key: Optional[str] = None,
    ) -> Aggregate:
        """Aggregate over a section, or over one part of it."""
        grouped = catalog.by_section(section_key)
        if part_key is not None:
            exercises = grouped.get(part_key, [])
        else:
            exercises = [e for part in grouped.values() for e in part]
        return self._aggregate(exercises)

    def overall(self, catalog: "ExerciseCatalog") -> Aggregate:
        return self._aggregate(catalog.all())

    def section_breakdown(self, catalog: "ExerciseCatalog") -> list[SectionProgress]:
        """
        Per-section report: section and part aggregates plus a preview of
        the first few unmastered exercise ids.

        Sections without exercises are left out.
        """
        report = []
        for section in catalog.sections():
            grouped = catalog.by_section(section.key)
            if not grouped:
                continue
            exercises = [e for part in grouped.values() for e in part]
            pending = [e.id for e in exercises if not self.is_mastered(e.id)]
            report.append(
                SectionProgress(
                    section=section.key,
                    title=section.title,
                    aggregate=self._aggregate(exercises),
                    parts=[
                        PartProgress(part=part, aggregate=self._aggregate(items))
                        for part, items in grouped.items()
                    ],
                    unmastered_preview=pending[:UNMASTERED_PREVIEW],
                    unmastered_remaining=max(len(pending) - UNMASTERED_PREVIEW, 0),
                )
            )
        return report
