"""Environment and scoring weight configuration."""

import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv

from nightbuzz.models import ScoringWeights

load_dotenv()

logger = logging.getLogger(__name__)

REPO_ROOT = Path(__file__).resolve().parents[1]
SCORING_WEIGHTS_PATH = os.getenv("SCORING_WEIGHTS_PATH")
DEFAULT_OUTPUT_PATH = Path(os.getenv("NIGHTBUZZ_OUTPUT_PATH", REPO_ROOT / "data" / "leaderboards.json"))
EXPERT_MODE = os.getenv("NIGHTBUZZ_EXPERT_MODE", "false").lower() == "true"
LOG_LEVEL = os.getenv("NIGHTBUZZ_LOG_LEVEL", "INFO")
# Zone the expected peak hours are written in
TIMEZONE = os.getenv("NIGHTBUZZ_TIMEZONE", "America/Chicago")

EXPECTED_WEIGHT_TOTAL = 100


def weight_totals(weights: ScoringWeights) -> Dict[str, float]:
    """Sum of component weights per score; each is expected to be 100."""
    return {
        "tonight": sum(weights.tonight.model_dump().values()),
        "monthly": sum(weights.monthly.model_dump().values()),
    }


def load_weights(path: Optional[Path] = None) -> ScoringWeights:
    """Resolve the weights for one run.

    Reads ``path`` (or ``SCORING_WEIGHTS_PATH``) when set, otherwise returns
    the defaults. Totals other than 100 are logged but not rejected.
    """
    source = path or (Path(SCORING_WEIGHTS_PATH) if SCORING_WEIGHTS_PATH else None)
    if source is None:
        logger.info("No weights file configured; using default weights")
        weights = ScoringWeights()
    else:
        weights = ScoringWeights.model_validate(json.loads(Path(source).read_text()))
        logger.info("Loaded scoring weights v%s from %s", weights.version, source)

    for name, total in weight_totals(weights).items():
        if abs(total - EXPECTED_WEIGHT_TOTAL) > 1e-9:
            logger.warning("%s weights sum to %s, expected %s", name, total, EXPECTED_WEIGHT_TOTAL)

    return weights
