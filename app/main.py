from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI

from app.api.rest_routes.advisory import router as advisory_router
from app.api.rest_routes.recent_searches import router as recent_searches_router
from app.core.llm_client import close_completion_client
from app.core.mongodb import close_mongo_client, init_mongo_client

load_dotenv()


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_mongo_client()
    yield
    await close_completion_client()
    await close_mongo_client()


app = FastAPI(lifespan=lifespan)

app.include_router(advisory_router)
app.include_router(recent_searches_router)


@app.get("/")
async def root():
    return {"message": "Welcome to the Kisan Seva agronomy assistant!"}
