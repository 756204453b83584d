"""Shared fakes: an in-memory Mongo database and a headless browser stand-in."""
from contextlib import asynccontextmanager

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from main import app
from config.db import get_database
from services.pdf_service import BrowserLauncher, PdfRenderer, get_pdf_renderer


# ------------------- Mongo ------------------------
class InsertResult:
    def __init__(self, inserted_id):
        self.inserted_id = inserted_id


class FakeCursor:
    def __init__(self, docs):
        self.docs = docs

    async def to_list(self, length=None):
        return list(self.docs if length is None else self.docs[:length])


class FakeCollection:
    def __init__(self):
        self.docs = []

    @staticmethod
    def _matches(doc, query):
        return all(doc.get(k) == v for k, v in (query or {}).items())

    async def find_one(self, query):
        return next((dict(d) for d in self.docs if self._matches(d, query)), None)

    def find(self, query=None):
        return FakeCursor([dict(d) for d in self.docs if self._matches(d, query)])

    async def insert_one(self, doc):
        doc = {"_id": ObjectId(), **doc}
        self.docs.append(doc)
        return InsertResult(doc["_id"])

    async def create_index(self, *args, **kwargs):
        return kwargs.get("name", "index")


class FakeDatabase:
    def __init__(self):
        self.collections = {}

    def get_collection(self, name):
        return self.collections.setdefault(name, FakeCollection())

    def __getitem__(self, name):
        return self.get_collection(name)


# ------------------- Browser ------------------------
class FakePage:
    def __init__(self, pdf_bytes=b"%PDF-1.7 fake", error=None):
        self.pdf_bytes = pdf_bytes
        self.error = error
        self.content = None
        self.pdf_options = None

    async def set_content(self, html, wait_until=None):
        self.content = html
        self.wait_until = wait_until

    async def pdf(self, **options):
        if self.error:
            raise self.error
        self.pdf_options = options
        return self.pdf_bytes


class FakeBrowser:
    def __init__(self, page):
        self.page = page
        self.closed = False

    async def new_page(self):
        return self.page


class FakeLauncher(BrowserLauncher):
    name = "fake"

    def __init__(self, page=None, launch_error=None):
        self.page = page or FakePage()
        self.launch_error = launch_error
        self.browser = None

    @asynccontextmanager
    async def acquire(self):
        if self.launch_error:
            raise self.launch_error
        self.browser = FakeBrowser(self.page)
        try:
            yield self.browser
        finally:
            self.browser.closed = True


class RecordingRenderer(PdfRenderer):
    """Keeps the assembled HTML so tests can inspect the markup."""

    def __init__(self, launcher=None):
        super().__init__(launcher or FakeLauncher(), timeout=5)
        self.html = None

    async def rasterize(self, html):
        self.html = html
        return await super().rasterize(html)


# ------------------- Fixtures ------------------------
@pytest.fixture
def fake_db():
    return FakeDatabase()


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def client(fake_db, renderer):
    app.dependency_overrides[get_database] = lambda: fake_db
    app.dependency_overrides[get_pdf_renderer] = lambda: renderer
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_launcher():
    return FakeLauncher


@pytest.fixture
def make_page():
    return FakePage
