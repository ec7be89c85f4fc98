import pytest
import pytest_asyncio
from typing import AsyncGenerator

from httpx import AsyncClient, ASGITransport
from tortoise import Tortoise

from config import build_tortoise_config
from db.models import Category, Product
from server.server import create_app


@pytest_asyncio.fixture(scope="function", autouse=True)
async def initialize_db():
    """Свежая база SQLite в памяти для каждого теста."""
    await Tortoise.init(config=build_tortoise_config("sqlite://:memory:"))
    await Tortoise.generate_schemas()

    yield

    await Tortoise.close_connections()


@pytest_asyncio.fixture(scope="function")
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """Фикстура для асинхронного тестового клиента."""
    app = create_app(testing=True)

    # ASGITransport не запускает lifespan: БД уже поднята фикстурой initialize_db
    async with AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test"
    ) as client:
        yield client


@pytest_asyncio.fixture
async def category() -> Category:
    return await Category.create(name="Electronics")


@pytest_asyncio.fixture
async def product(category: Category) -> Product:
    product = await Product.create(
        name="Widget",
        price=9.99,
        category=category,
        description="A small widget",
        currency="USD",
        quantity=5,
    )
    return product


@pytest.fixture
def missing_id() -> str:
    return "3f2b8c1e-9d4a-4e6b-8f0a-1c2d3e4f5a6b"
