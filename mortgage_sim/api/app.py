"""FastAPI application entry point."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mortgage_sim.api.routes import amortization

app = FastAPI(
    title="Mortgage Simulator",
    description="Fixed and variable rate mortgage amortization",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(amortization.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
