"""
Seed a SUPER_ADMIN account.

    python create_admin.py [--email E] [--password P] [--name N] [--department D]

Defaults come from env.yaml (DEFAULT_ADMIN_*). Running it again with the
same email changes nothing.
"""

import argparse
import asyncio
import logging
import sys

from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.use_cases.admin import CreateAdminCommand, CreateAdminUseCase
from src.depends import AsyncSessionLocal, engine, init_db

logger = logging.getLogger("create_admin")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create the initial super admin")
    parser.add_argument("--email", default=ApplicationConfig.DEFAULT_ADMIN_EMAIL)
    parser.add_argument("--password", default=ApplicationConfig.DEFAULT_ADMIN_PASSWORD)
    parser.add_argument("--name", default=ApplicationConfig.DEFAULT_ADMIN_NAME)
    parser.add_argument("--department", default=None)
    return parser.parse_args(argv)


async def main(args: argparse.Namespace) -> int:
    await init_db()

    async with AsyncSessionLocal() as session:
        result = await CreateAdminUseCase(SqlAlchemyUnitOfWork(session)).execute(
            CreateAdminCommand(
                email=args.email,
                password=args.password,
                name=args.name,
                department=args.department,
            )
        )
    await engine.dispose()

    if result.is_err():
        logger.error(f"Could not create admin: {result.error.code} {result.error.message}")
        return 1

    response = result.value
    if response.created:
        logger.info(f"Super admin created: {response.admin.email}")
    else:
        logger.info(f"Admin already exists: {response.admin.email}")
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=ApplicationConfig.LOG_LEVEL, format="%(levelname)s %(message)s")
    sys.exit(asyncio.run(main(parse_args())))
