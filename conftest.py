import pytest


@pytest.fixture
def anyio_backend():
    # The async tests drive asyncio directly (asyncio.create_task)
    return "asyncio"
