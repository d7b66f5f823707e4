import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from kundali_chart.api.v1.router import api_router
from kundali_chart.config import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Kundali Chart")

# 1. Enable CORS so a separate frontend can call the API
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 2. Include API Routes
app.include_router(api_router, prefix="/api/v1")


def main(argv=None):
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--host", type=str, default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args(argv)

    logger.info(f"Server starting on http://{args.host}:{args.port}/docs")
    uvicorn.run("kundali_chart.main:app", host=args.host, port=args.port, reload=settings.DEBUG)


if __name__ == "__main__":
    main()
