import logging

from dotenv import load_dotenv

from tranche_optimizer.config import settings
from tranche_optimizer.domain.schemas import SearchOutcome
from tranche_optimizer.exceptions import AppException
from tranche_optimizer.services import render_report, search_best_option
from tranche_optimizer.utils import setup_logging

load_dotenv()


def run() -> SearchOutcome:
    """Search the configured rate grid and print the report."""
    setup_logging()

    logger = logging.getLogger("tranche_optimizer.main")
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(
        f"Evaluating {len(settings.rate_grid)} offers at principal "
        f"{settings.evaluation_principal:,.0f}"
    )

    try:
        outcome = search_best_option(settings.rate_grid, settings.evaluation_principal)
    except AppException as exc:
        logger.error(f"Search aborted: {exc.message} {exc.details}")
        raise SystemExit(1) from exc

    print(render_report(outcome))
    return outcome


if __name__ == "__main__":
    run()
