"""Create MongoDB indexes and seed demo content.

Run with ``artvault-setup-db`` after configuring the environment. Seeding only
happens when the users collection is empty, so the command is safe to rerun.
"""

import asyncio
import logging

from artvault.app_logging import configure_logging
from artvault.containers import AppContainer, build_container
from artvault.services.seed import DEMO_USERS

logger = logging.getLogger(__name__)


def main(container: AppContainer | None = None) -> int:
    """Run the setup and return a process exit code."""
    configure_logging()
    try:
        resolved = container or build_container()
    except Exception:
        logger.exception("Could not load configuration")
        return 1
    configure_logging(resolved.settings.log_level)
    try:
        report = resolved.seed_service.run()
    except Exception:
        logger.exception("Database setup failed")
        return 1
    finally:
        asyncio.run(resolved.close_resources())

    print("ArtVault database setup complete")
    print(f"  users created:   {report.users_created}")
    print(f"  artwork created: {report.artwork_created}")
    if report.users_created:
        print("  demo accounts:")
        for email, _, password in DEMO_USERS:
            print(f"    {email} / {password}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
