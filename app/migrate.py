# app/migrate.py
# python -m app.migrate --database-url postgresql://... --seed

import logging
from typing import Optional

import typer
from sqlmodel import Session

from app import data
from app.config import get_settings
from app.db import create_db_and_tables, get_engine
from app.models import Barber, Reservation, User

logger = logging.getLogger(__name__)

cli = typer.Typer(name="migrate", help="Create barbershop booking tables", add_completion=False)


def seed_demo_data(session: Session) -> int:
    # insert missing demo rows, returns how many were added
    added = 0
    for model, rows in ((User, data.users), (Barber, data.barbers), (Reservation, data.reservations)):
        for row in rows:
            if session.get(model, row["id"]) is not None:
                continue
            session.add(model(**row))
            added += 1
        # flush per table so foreign keys resolve in order
        session.flush()
    session.commit()
    return added


@cli.command()
def main(
    database_url: Optional[str] = typer.Option(None, help="Overrides DATABASE_URL"),
    seed: bool = typer.Option(False, "--seed", help="Load the demo barbers and reservations"),
):
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")

    url = database_url or get_settings().database_url
    if not url:
        logger.error("DATABASE_URL not found")
        raise typer.Exit(code=1)

    engine = get_engine(url)
    logger.info("Creating tables...")
    create_db_and_tables(engine)

    if seed:
        with Session(engine) as session:
            added = seed_demo_data(session)
        logger.info("Seeded %d demo rows", added)

    logger.info("Migration completed successfully!")


if __name__ == "__main__":
    cli()
