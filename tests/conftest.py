"""
Shared pytest fixtures for the events catalog test suite.

Provides catalog documents, settings pointing at no real source, a loaded
catalog state and in-memory surface/location doubles.
"""

import copy

import pytest

from senior_events.catalog.store import CatalogStore
from senior_events.configs.config import Config
from senior_events.configs.settings import Settings
from senior_events.rendering.surface import InMemorySurface
from senior_events.routing.section_router import InMemoryLocation
from senior_events.schemas.event import LoadOutcome

SAMPLE_DOCUMENT = {
    "eventos_brasil": {
        "Festival Rio 60+": {
            "local": {"cidade": "Rio de Janeiro", "pais": "Brasil"},
            "tipo_espaco": "Teatro",
            "capacidade": "350 lugares",
            "duracao": "1 dia",
            "temas": ["Música", "Memória"],
            "atividades_dinamicas": ["Coral", "Oficina de dança"],
            "organizadores": "SESC Rio",
            "links": "https://example.org/rio",
        },
        "Sarau Paulistano": {
            "local": "São Paulo, Brasil",
            "temas": "Literatura",
            "impacto_feedback": "Alta participação",
        },
    },
    "eventos_internacionais": {
        "Lisbon Silver Fest": {
            "local": {"cidade": "Lisboa", "pais": "Portugal"},
            "tipo_espaco": "Centro de congressos",
            "temas": ["Tecnologia", "Bem-estar"],
            "links": ["https://example.org/a", "https://example.org/b"],
        },
    },
    "tendencias_2025_2026": {
        "gamificacao": ["Pontos por participação"],
        "novos_formatos_hibridos": "Transmissão acessível",
    },
}


@pytest.fixture
def sample_document():
    """Return a fresh copy of the sample catalog document."""
    return copy.deepcopy(SAMPLE_DOCUMENT)


@pytest.fixture
def ui_config():
    """Surface configuration shipped with the package."""
    return Config.load_ui_config()


@pytest.fixture
def settings(tmp_path):
    """Settings with no remote source and a local path that does not exist."""
    return Settings(
        DATA_SOURCE_URL=None,
        DATA_FILE_PATH=tmp_path / "missing.json",
        REQUEST_TIMEOUT=1.0,
    )


@pytest.fixture
def catalog_state(settings, ui_config, sample_document):
    """CatalogState built from the sample document."""
    store = CatalogStore(settings, ui_config, adapters=[])
    return store.build_state(sample_document, LoadOutcome.LOCAL_OK)


@pytest.fixture
def surface():
    """Surface where every target exists."""
    return InMemorySurface()


@pytest.fixture
def location():
    """Empty location hash."""
    return InMemoryLocation()
