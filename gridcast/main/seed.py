"""
Seed Entry Point - Main Layer

Populates MongoDB with the default stations and simulated hourly demand:

    python -m gridcast.main.seed --start 2024-01-01 --end 2025-01-01
"""

import argparse
import asyncio
from datetime import datetime
from typing import Optional, Sequence

from gridcast.application.use_cases.seed_demand_history_use_case import SeedSummary
from gridcast.domain.entities.demand import ensure_utc
from gridcast.main.config import get_settings
from gridcast.main.container import AppContainer, app_lifespan, init_container
from gridcast.shared import configure_logging, get_logger, update_logging_from_settings

logger = get_logger(__name__)


def _instant(value: str) -> datetime:
    try:
        return ensure_utc(datetime.fromisoformat(value))
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"not an ISO8601 date: {value!r}") from e


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed stations and demand history")
    parser.add_argument("--start", type=_instant, default=_instant("2024-01-01"))
    parser.add_argument("--end", type=_instant, default=_instant("2025-01-01"))
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--batch-size", type=int, default=1000)
    return parser.parse_args(argv)


async def seed_history(
    container: AppContainer, args: argparse.Namespace
) -> SeedSummary:
    """Run the seeding use case inside the container's resource lifespan."""
    async with app_lifespan():
        use_case = container.seed_demand_history_use_case(
            batch_size=args.batch_size, seed=args.seed
        )
        return await use_case.execute(args.start, args.end)


def main(argv: Optional[Sequence[str]] = None) -> SeedSummary:
    configure_logging()
    settings = get_settings()
    update_logging_from_settings(settings)

    args = parse_args(argv)
    logger.info("seed.starting", start=args.start.isoformat(), end=args.end.isoformat())

    return asyncio.run(seed_history(init_container(settings), args))


if __name__ == "__main__":
    main()
