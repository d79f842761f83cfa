import threading

import pytest
from fastapi.testclient import TestClient

from geovaluate.main import app
from geovaluate.routers.analysis import model_factory

class StubModel:
    """Records prompts and replies with canned text (or raises)."""
    name = "stub"

    def __init__(self):
        self.reply = ""
        self.error: Exception | None = None
        self.prompts: list[str] = []
        self.threads: list[threading.Thread] = []

    def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        self.threads.append(threading.current_thread())
        if self.error is not None:
            raise self.error
        return self.reply

@pytest.fixture
def stub_model():
    return StubModel()

@pytest.fixture
def client(stub_model):
    app.dependency_overrides[model_factory] = lambda: (lambda: stub_model)
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
