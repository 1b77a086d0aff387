"""Rollup of the accuracy scores already attached to stored records."""

from __future__ import annotations

from typing import Sequence

from gridcast.domain.entities.accuracy import AccuracySummary
from gridcast.domain.entities.demand import DemandRecord
from gridcast.domain.entities.training import ModelStatus


def summarize_accuracy(
    records: Sequence[DemandRecord], model_status: ModelStatus
) -> AccuracySummary:
    """
    Average the accuracy of the records that carry one.

    The average only covers accuracy-bearing records while the total
    counts every record, so a dataset of mostly future rows still
    reports its full size. With nothing to average the average is 0.
    """
    scores = [record.accuracy for record in records if record.accuracy is not None]
    average = sum(scores) / len(scores) if scores else 0.0
    return AccuracySummary(
        average_accuracy=round(average, 2),
        total_records=len(records),
        model_status=model_status,
    )
