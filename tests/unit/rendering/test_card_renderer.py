"""
Unit tests for the card renderer.
"""

from senior_events.ingestion.normalization.field_normalizer import normalize
from senior_events.rendering.card_renderer import (
    DETAIL_FIELDS,
    format_category_title,
    render_detail,
    render_summary,
    render_trends,
)
from senior_events.schemas.event import NOT_INFORMED

FULL_RECORD = {
    "local": {"cidade": "Recife", "pais": "Brasil"},
    "tipo_espaco": "Teatro",
    "capacidade": "300",
    "formato": ["Palestra", "Oficina"],
    "duracao": "1 dia",
    "temas": ["Frevo"],
    "atividades": ["Aula de dança"],
    "organizadores": ["Prefeitura"],
    "parceiros": ["SESC"],
    "networking": "Café",
    "impacto": "Alto",
    "links": ["https://a", "https://b"],
}


class TestRenderSummary:
    """Tests for render_summary."""

    def test_fields(self):
        """Should expose name, location, venue, capacity and duration."""
        summary = render_summary(normalize(FULL_RECORD, name="Frevo 60+"))

        assert summary.key == "Frevo 60+"
        assert summary.name == "Frevo 60+"
        assert summary.location == "Recife, Brasil"
        assert summary.venue_type == "Teatro"
        assert summary.capacity == "300"
        assert summary.duration == "1 dia"
        assert "Frevo 60+" in summary.aria_label

    def test_missing_fields_show_sentinel(self):
        """Should show the sentinel on the card for missing fields."""
        summary = render_summary(normalize({}, name="X"))
        assert summary.venue_type == NOT_INFORMED
        assert summary.capacity == NOT_INFORMED


class TestRenderDetail:
    """Tests for render_detail."""

    def test_fixed_order(self):
        """Should list every informed field in the fixed order."""
        detail = render_detail(normalize(FULL_RECORD, name="Frevo 60+"))

        assert detail.title == "Frevo 60+"
        assert [row.label for row in detail.rows] == [label for _, label in DETAIL_FIELDS]
        assert detail.links == ["https://a", "https://b"]
        assert detail.has_links is True

    def test_omits_sentinel_rows(self):
        """Should drop rows whose content is the sentinel."""
        detail = render_detail(
            normalize({"local": "Olinda", "temas": ["Arte"]}, name="Mostra")
        )
        assert [row.label for row in detail.rows] == ["Location", "Topics"]

    def test_list_and_scalar_rows(self):
        """Should flag list contents and keep scalars as text."""
        detail = render_detail(normalize(FULL_RECORD, name="X"))
        rows = {row.label: row for row in detail.rows}

        assert rows["Format"].is_list is True
        assert rows["Format"].content == ["Palestra", "Oficina"]
        assert rows["Networking"].is_list is False
        assert rows["Networking"].content == "Café"

    def test_no_links_block_without_links(self):
        """Should suppress the links block when there are no links."""
        detail = render_detail(normalize({"local": "Olinda"}, name="X"))
        assert detail.links == []
        assert detail.has_links is False

    def test_empty_event(self):
        """Should render no rows for an event without information."""
        assert render_detail(normalize({}, name="X")).rows == []


class TestTrends:
    """Tests for trends rendering."""

    def test_configured_title(self):
        """Should use the configured title."""
        assert format_category_title("gamificacao", {"gamificacao": "Gamificação"}) == (
            "Gamificação"
        )

    def test_generated_title(self):
        """Should title-case unknown snake_case ids."""
        assert format_category_title("novos_formatos_hibridos") == "Novos Formatos Hibridos"

    def test_render_trends(self, catalog_state, ui_config):
        """Should keep document order and items."""
        categories = render_trends(catalog_state.trends, ui_config.trends.titles)

        assert [c.category_id for c in categories] == ["gamificacao", "novos_formatos_hibridos"]
        assert categories[0].title == "Gamificação"
        assert categories[1].items == ["Transmissão acessível"]
