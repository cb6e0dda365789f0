import logging

import uvicorn
from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from config import APP_TITLE, LOG_LEVEL
from badminton.router import router as badminton_router

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title=APP_TITLE)
app.include_router(badminton_router)


@app.get("/")
async def root():
    return RedirectResponse("/badminton/", status_code=303)


if __name__ == "__main__":
    uvicorn.run("main:app", host="127.0.0.1", port=8000)
