"""
FastAPI application factory for the iLEAP demo API.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ileap.api import footprints_router, schemas_router, service_router, tad_router
from ileap.core.config import get_config
from ileap.pydantic_models.api import BadRequest
from ileap.services.demo_data.generator import gen_rnd_demo_data, gen_rnd_tad_data
from ileap.services.exceptions import InvalidPfIdError
from ileap.utils.constants import DemoCompany

logging.basicConfig(
    level=logging.DEBUG, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)


def register_routers(app: FastAPI):
    """Register all API routers."""
    app.include_router(service_router)
    app.include_router(footprints_router)
    app.include_router(tad_router)
    app.include_router(schemas_router)


def register_exception_handlers(app: FastAPI):
    """Map errors onto PACT error response bodies."""

    @app.exception_handler(InvalidPfIdError)
    async def invalid_pf_id_handler(request: Request, exc: InvalidPfIdError):
        logging.warning(f"Invalid footprint id: {exc}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content=BadRequest().model_dump()
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ):
        logging.warning(f"Request validation failed: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content=BadRequest().model_dump()
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logging.error(f"Exception occurred: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": str(exc)},
        )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.

    Generates the demo footprints and transport activity data served by the API.
    """
    logging.info("Application startup")
    demo = app.state.config.section("demo")
    seed = demo.get("seed")

    app.state.footprints = gen_rnd_demo_data(
        demo.get("size", 10),
        seed=seed,
        company_name=demo.get("company_name", DemoCompany.NAME),
        company_urn=demo.get("company_urn", DemoCompany.URN),
    )
    app.state.tads = gen_rnd_tad_data(demo.get("tad_size", 10), seed=seed)
    logging.info(
        f"Generated {len(app.state.footprints)} footprints "
        f"and {len(app.state.tads)} TADs"
    )

    try:
        yield
    finally:
        logging.info("Application shutdown")


def get_app(config_file: str) -> FastAPI:
    """
    Application factory function.

    Args:
        config_file: Configuration file name (e.g., "production.toml")

    Returns:
        Configured FastAPI application instance
    """
    config = get_config(config_file)
    api_config = config.section("api")

    app = FastAPI(
        title=api_config.get("title", "iLEAP Demo API"),
        description=api_config.get(
            "description", "PACT Tech Spec v2 footprints with iLEAP extensions"
        ),
        version=api_config.get("version", "0.2.0"),
        debug=api_config.get("debug", False),
        lifespan=lifespan,
        generate_unique_id_function=lambda route: (
            f"{route.tags[0]}-{route.name}" if route.tags else route.name
        ),
    )

    app.state.config = config

    register_routers(app)
    register_exception_handlers(app)

    origins = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    return app
