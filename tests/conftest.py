import pytest

from app import create_app
from dictionary_store import DictionaryStore
from translation import TranslationService

SAMPLE_DICTIONARY = """\
# sample dictionary
кот=cat

дом=house
домик=small house
до свидания=goodbye
собака=Dog
"""


@pytest.fixture
def dictionary_file(tmp_path):
    path = tmp_path / "dictionary.txt"
    path.write_text(SAMPLE_DICTIONARY, encoding="utf-8")
    return path


@pytest.fixture
def store(dictionary_file):
    return DictionaryStore(str(dictionary_file))


@pytest.fixture
def service(store):
    service = TranslationService(store, max_workers=4, batch_timeout=5)
    yield service
    service.shutdown()


@pytest.fixture
def app(dictionary_file):
    app = create_app(
        {
            "TESTING": True,
            "DICTIONARY_PATH": str(dictionary_file),
            "BATCH_WORKERS": 4,
        }
    )
    yield app
    app.translation_service.shutdown()


@pytest.fixture
def client(app):
    return app.test_client()
