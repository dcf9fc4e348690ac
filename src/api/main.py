from __future__ import annotations

from fastapi import FastAPI

from mdpreview.logs import configure_logging

from .routers import health, preview, samples

configure_logging("mdpreview-api")

app = FastAPI(title="mdpreview API", version="0.1.0")

app.include_router(health.router)
app.include_router(preview.router)
app.include_router(samples.router)


@app.get("/", include_in_schema=False)
def root() -> dict[str, str]:
    return {"status": "ok"}


if __name__ == "__main__":  # pragma: no cover
    import uvicorn

    from mdpreview.config import get_settings

    settings = get_settings()
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
