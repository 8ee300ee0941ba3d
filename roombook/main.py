import logging

import yaml
from fastapi import FastAPI
from roombook.infrastructure.config import settings
from roombook.infrastructure.database import Base, engine
from roombook.presentation.routers import router

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(name)-20s %(levelname)-7s %(message)s",
)

app = FastAPI()


# Use the contractual schema
def custom_openapi():
    with open(settings.openapi_path) as f:
        return yaml.safe_load(f)


app.openapi = custom_openapi
Base.metadata.create_all(bind=engine)
app.include_router(router)
