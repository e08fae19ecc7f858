import logging
import os

from fastapi import FastAPI

from imdb_people.api.routers.persons import router as persons_router

logging.basicConfig(
    level=os.getenv("IMDB_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

app = FastAPI(title="IMDb People", version="0.1")


@app.get("/health")
def health():
    return {"ok": True}


app.include_router(persons_router)
