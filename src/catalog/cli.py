"""Console entry point: seed the product store and print the catalog report."""

import asyncio
import traceback
from collections.abc import Callable

import typer

from src.catalog.core.services.database import DbSessionService
from src.catalog.mediator import Mediator
from src.catalog.queries import GetAllProductsQuery, GetProductByIdQuery
from src.catalog.report import render_product_detail, render_product_list
from src.catalog.runtime.app_startup import configure_logging
from src.catalog.runtime.init_db import init_db

FEATURED_PRODUCT_ID = 1

app = typer.Typer(
    name="catalog",
    help="Product catalog demo - seed the store and print the catalog",
    add_completion=False,
)


async def run_catalog(
    db_session_service: DbSessionService,
    echo: Callable[[str], None] = typer.echo,
) -> None:
    """Seed the store, then run both catalog queries and print the report."""
    echo("Initializing database...")
    init_db(db_session_service)
    echo("Database initialized successfully.\n")

    with db_session_service.session_scope() as session:
        mediator = Mediator(session)

        echo("Fetching all products...")
        products = await mediator.send(GetAllProductsQuery())
        for line in render_product_list(products):
            echo(line)

        echo("")

        echo(f"Fetching product with ID {FEATURED_PRODUCT_ID}...")
        product = await mediator.send(GetProductByIdQuery(id=FEATURED_PRODUCT_ID))
        for line in render_product_detail(product):
            echo(line)

    echo("\nApplication completed successfully.")


@app.command()
def run() -> None:
    """Seed the product store and print the catalog report."""
    try:
        configure_logging()
        db_session_service = DbSessionService()
        try:
            asyncio.run(run_catalog(db_session_service))
        finally:
            db_session_service.dispose()
    except Exception as e:
        typer.echo(f"An error occurred: {e}")
        typer.echo(f"Stack trace: {traceback.format_exc()}")
        raise typer.Exit(code=1) from e


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
