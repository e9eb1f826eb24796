import logging
from contextlib import asynccontextmanager
from http import HTTPStatus

from fastapi import FastAPI

from movie_catalog.applications.interfaces.dtos.message import Message
from movie_catalog.infrastructure.config.settings import CatalogSettings
from movie_catalog.infrastructure.logging.logger import setup_logging
from movie_catalog.infrastructure.persistence.database import create_tables, dispose_engine, get_engine, set_engine
from movie_catalog.presentation.routers import movies

setup_logging(noisy_libs={"sqlalchemy.engine": logging.WARNING})


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = get_engine()
    set_engine(engine)
    if CatalogSettings().create_tables_on_startup:
        await create_tables(engine)
    try:
        yield
    finally:
        await dispose_engine()


app = FastAPI(title="Movie Catalog", lifespan=lifespan)

app.include_router(movies.router)


@app.get("/", status_code=HTTPStatus.OK, response_model=Message)
def read_root():
    return {"message": "Movie catalog is running"}
