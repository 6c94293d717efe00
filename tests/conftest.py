from __future__ import annotations

import pytest
from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient

from webhelpers import ResponseWrapper
from webhelpers.core.config import Config
from webhelpers.core.middleware import install_handlers


@pytest.fixture
def app() -> FastAPI:
    app = install_handlers(FastAPI())

    @app.get("/items/{item_id}")
    async def read_item(item_id: int):
        if item_id == 0:
            raise HTTPException(status_code=404, detail="Item not found")
        return ResponseWrapper.success({"id": item_id}).to_json_response()

    @app.get("/orders/{order_id}")
    async def read_order(order_id: int):
        status_code = 409 if order_id == 1 else 499
        raise HTTPException(status_code=status_code, detail={"field": "order_id", "reason": "locked"})

    @app.get("/boom")
    async def boom():
        raise RuntimeError("kaboom")

    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def expose_technical(monkeypatch):
    monkeypatch.setattr(Config, "EXPOSE_TECHNICAL_MESSAGES", True)


@pytest.fixture
def hide_technical(monkeypatch):
    monkeypatch.setattr(Config, "EXPOSE_TECHNICAL_MESSAGES", False)
