import os

from sqlgen.config import config
from .utils.logger import setup_logger

# Only ``logs`` today; the log handler writes there.
for key, path in config.get('base_dirs', {}).items():
    if isinstance(path, str):
        os.makedirs(path, exist_ok=True)

setup_logger('sqlgen_init').info(
    "sqlgen initialised; default targets: %s",
    ", ".join(config['generation']['default_targets']) or "all registered dialects",
)

# ------------------------- FastAPI application ---------------------------

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

app = FastAPI(title="SQLGen CRUD Generator API", version=config.get('api', {}).get('version', 'v1'))

# The Streamlit frontend sends the entitlement cookie cross-origin.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


from .api.routes import api_router

app.include_router(api_router)

route_logger = setup_logger('routes')
for route in app.routes:
    if hasattr(route, 'methods'):
        route_logger.info(f"{list(route.methods)}  {route.path}")
