"""
Shared fixtures. Environment is set before the app modules are imported so
settings pick up a throwaway database and no OpenAI key.
"""

import os
import tempfile
from types import SimpleNamespace

_TMP_DIR = tempfile.mkdtemp(prefix="learning_platform_tests_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_TMP_DIR, 'test.db')}"
os.environ["OPENAI_API_KEY"] = ""
os.environ["SECRET_KEY"] = "test-secret"
os.environ["RATE_LIMIT_PER_MINUTE"] = "1000"

import httpx  # noqa: E402
import pytest  # noqa: E402

from learning_platform.main import app  # noqa: E402
from learning_platform.models.database import drop_db, init_db  # noqa: E402
from learning_platform.services.ai_service import AIGateway  # noqa: E402
from learning_platform.services.question_log import SqlQuestionLog  # noqa: E402
from learning_platform.services.tutor_service import TutorService, get_tutor  # noqa: E402


class FakeCompletions:
    def __init__(self, response=None, error=None) -> None:
        self.response = response
        self.error = error
        self.calls: list[dict] = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.response


class FakeOpenAI:
    """Stands in for openai.AsyncOpenAI; only chat.completions.create is used."""

    def __init__(self, response=None, error=None) -> None:
        self.completions = FakeCompletions(response=response, error=error)
        self.chat = SimpleNamespace(completions=self.completions)


def completion(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


@pytest.fixture
def fake_openai():
    return FakeOpenAI


@pytest.fixture
async def tutor():
    service = TutorService(AIGateway(api_key=""), SqlQuestionLog())
    yield service
    await service.drain()


@pytest.fixture
async def client(tutor):
    await init_db()
    app.dependency_overrides[get_tutor] = lambda: tutor
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
    await tutor.drain()
    await drop_db()


@pytest.fixture
def make_completion():
    return completion
