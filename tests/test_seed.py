"""Tests for loading initial prompts."""

import pytest
from fastapi.testclient import TestClient

from teleprompter.main import create_app
from teleprompter.schemas.prompt import PromptInput
from teleprompter.seed import load_seed_if_empty

from .conftest import make_settings

SEED = """
prompts:
  - id: greet
    text: "Hello {name}"
    namespace: bots
  - id: farewell
    text: "Bye"
"""


@pytest.fixture
def seed_file(tmp_path):
    path = tmp_path / "initial_data.yaml"
    path.write_text(SEED, encoding="utf-8")
    return path


@pytest.mark.asyncio
async def test_seed_loads_into_empty_store(store, seed_file):
    assert await load_seed_if_empty(store, seed_file) is True

    prompts = await store.list()
    assert [(p.id, p.namespace) for p in prompts] == [("farewell", None), ("greet", "bots")]


@pytest.mark.asyncio
async def test_seed_skipped_when_prompts_exist(store, seed_file):
    await store.write(PromptInput(id="existing", text="keep me"))

    assert await load_seed_if_empty(store, seed_file) is False
    assert [p.id for p in await store.list()] == ["existing"]


@pytest.mark.asyncio
async def test_missing_seed_file_raises(store, tmp_path):
    with pytest.raises(FileNotFoundError):
        await load_seed_if_empty(store, tmp_path / "nope.yaml")


def test_app_loads_seed_on_startup(tmp_path, seed_file):
    app = create_app(make_settings(tmp_path, initial_data_path=str(seed_file)))

    with TestClient(app) as client:
        assert client.get("/prompts/greet").json()["text"] == "Hello {name}"
