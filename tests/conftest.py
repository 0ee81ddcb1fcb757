from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.deps import get_store
from app.main import app
from app.services import cache
from app.services.depth_chart import DepthChartStore


@pytest.fixture
def store() -> DepthChartStore:
    return DepthChartStore()


@pytest.fixture
def client(store):
    cache.clear_all()
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    cache.clear_all()
