from contextlib import asynccontextmanager
from fastapi import FastAPI
from config.db import create_mongo_client, init_db
from config.env_config import MONGODB_DB_NAME


@asynccontextmanager
async def lifespan(app: FastAPI):
    client = create_mongo_client()
    app.state.mongo_client = client
    app.state.db = client[MONGODB_DB_NAME]
    await init_db(app.state.db)
    try:
        yield
    finally:
        client.close()


app = FastAPI(title="AI Resume Builder", lifespan=lifespan)
