"""
Tests for the server-rendered page and timeline fragments.
"""

from travel_recommender.views.html import render_page, render_timeline_items
from travel_recommender.views.timeline import build_entries


class TestRenderTimelineItems:
    """Tests for render_timeline_items."""

    def test_empty_placeholder(self):
        assert "No recommendations yet." in render_timeline_items([])

    def test_entry_markup(self, record_factory):
        html_doc = render_timeline_items(build_entries([record_factory(record_id=1)]))

        assert "No recommendations yet." not in html_doc
        assert "Ana &rarr;" in html_doc
        assert "Lisbon, Portugal" in html_doc
        assert "Age: 29 &bull; Travel style: Relaxed &bull; Activity: Hiking" in html_doc
        assert "17/10/2026" in html_doc or "18/10/2026" in html_doc

    def test_user_text_is_escaped(self, record_factory):
        record = record_factory(username="<script>x</script>", record_id=1)

        html_doc = render_timeline_items(build_entries([record]))

        assert "<script>x</script>" not in html_doc
        assert "&lt;script&gt;" in html_doc


class TestRenderPage:
    """Tests for render_page."""

    def test_form_fields_and_timeline(self):
        page = render_page([])

        for name in ("username", "age", "style", "activity"):
            assert f'name="{name}"' in page
        assert 'id="timeline"' in page
        assert "/ws/timeline" in page
        assert "No recommendations yet." in page
        assert "alert(" not in page

    def test_field_errors_and_values(self):
        page = render_page(
            [],
            values={"username": "A"},
            errors={"username": "String should have at least 2 characters"},
        )

        assert 'value="A"' in page
        assert "String should have at least 2 characters" in page

    def test_alert_script_cannot_break_out(self):
        page = render_page([], alert="Recommendation failed: </script><b>")

        assert 'alert("Recommendation failed: <\\/script><b>");' in page
