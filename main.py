"""Top-level FastAPI entrypoint (``uvicorn main:app``)."""

from service_skill_engine.api_factory import create_app

app = create_app()


__all__ = ["app"]
