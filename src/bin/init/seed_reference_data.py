"""
Script to create the schema and load reference data (states, payment methods,
coupons). Can be run via `python3 -m bin.init.seed_reference_data` from src/.
"""

import logging
import sys

from foodorder_shared.config import load_config
from foodorder_shared.db import get_session, init_db, init_engine
from foodorder_shared.models import Base
from foodorder_shared.services.reference_data import load_reference_data

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main():
    try:
        logger.info("Initializing database connection...")
        config = load_config("seed_script")
        init_engine(config)
        init_db(Base.metadata)

        with get_session() as session:
            added = load_reference_data(session)

        logger.info("Reference data seed completed: %s", added)

    except Exception as e:
        logger.error("Error seeding reference data: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
