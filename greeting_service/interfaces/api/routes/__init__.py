from fastapi import FastAPI

from .greeting import CATCH_ALL_PATH, greet


def register_routes(app: FastAPI) -> None:
    """Register the catch-all greeting route on the FastAPI application."""

    # Added on the app router directly: no method list is attached.
    app.router.add_route(CATCH_ALL_PATH, greet, include_in_schema=False)
