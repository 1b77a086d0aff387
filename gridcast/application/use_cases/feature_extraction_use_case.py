"""
Application Use Cases - Feature Extraction

Converts historical demand records into the (features, targets) arrays
the regression model is fitted on.
"""

from typing import Sequence, Tuple

import numpy as np
import structlog

from gridcast.domain.entities.demand import DemandRecord
from gridcast.shared.consts import FEATURE_COUNT

logger = structlog.get_logger(__name__)


class FeatureExtractionUseCase:
    """
    Builds the training matrices:
      - one row per record that has an observed demand
      - columns (temperature, humidity, day_of_week, hour, prior_demand)
      - target column is the observed demand
    Input order is kept, so identical inputs give identical matrices.
    """

    def execute(
        self, records: Sequence[DemandRecord]
    ) -> Tuple[np.ndarray, np.ndarray]:
        """
        Execute feature extraction.

        Args:
            records: Historical records, newest first

        Returns:
            Tuple of (features with shape (n, 5), targets with shape (n, 1))
        """
        pairs = [
            pair for pair in (record.to_training_pair() for record in records) if pair
        ]

        features = np.asarray(
            [vector for vector, _ in pairs], dtype=np.float32
        ).reshape(-1, FEATURE_COUNT)
        targets = np.asarray([target for _, target in pairs], dtype=np.float32).reshape(
            -1, 1
        )

        logger.info(
            "features.extracted",
            records=len(records),
            usable=len(pairs),
            skipped=len(records) - len(pairs),
        )

        return features, targets
