"""Load rate card configuration from a JSON file"""

import json
from pathlib import Path
from typing import Any, Dict, Union

from aagt_gateway.domain.exceptions import RateCardError
from aagt_gateway.domain.models import ComparisonRate, RateCard


def parse_rate_card(data: Dict[str, Any]) -> RateCard:
    """
    Build a RateCard from decoded JSON.

    Expected shape:
        {
          "purpose_rates": {"business": 8.95, ...},
          "standard_rate": 8.95,                       (optional)
          "comparison_rates": [
            {"lender": "...", "rate": 7.25, "fees": 3500,
             "comparison_rate": 7.58, "is_aagt": false}
          ]
        }

    Raises:
        RateCardError: If required keys are missing or values are malformed
    """
    try:
        purpose_rates = {str(purpose): float(rate) for purpose, rate in data["purpose_rates"].items()}
        comparison_rates = [
            ComparisonRate(
                lender=str(row["lender"]),
                rate=float(row["rate"]),
                fees=float(row["fees"]),
                comparison_rate=float(row["comparison_rate"]),
                is_aagt=bool(row.get("is_aagt", False)),
            )
            for row in data["comparison_rates"]
        ]
        standard_rate = float(data.get("standard_rate", purpose_rates.get("business", 8.95)))
    except (KeyError, ValueError, TypeError, AttributeError) as e:
        raise RateCardError(f"Invalid rate card data: {e}") from e

    if not purpose_rates:
        raise RateCardError("Rate card has no purpose rates")

    return RateCard(
        purpose_rates=purpose_rates,
        comparison_rates=comparison_rates,
        standard_rate=standard_rate,
    )


def load_rate_card(path: Union[str, Path]) -> RateCard:
    """
    Read and parse a rate card file.

    Raises:
        RateCardError: If the file cannot be read, is not JSON, or is malformed
    """
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as e:
        raise RateCardError(f"Cannot read rate card {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise RateCardError(f"Rate card {path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise RateCardError(f"Rate card {path} must contain a JSON object")

    return parse_rate_card(data)
