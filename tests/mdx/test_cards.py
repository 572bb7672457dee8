"""Tests for call-out cards and the step indicator."""

import pytest

from src.mdx.cards import CalloutCard, Step
from src.mdx.models import ComponentPropsError


class TestCalloutCard:
    def test_pros_card(self):
        html = CalloutCard("pros")({"title": "SWR", "pros": ["Built-in caching", "Revalidation on focus"]})
        assert "You might use SWR if..." in html
        assert "<span>Built-in caching</span>" in html
        assert "<span>Revalidation on focus</span>" in html
        assert "bg-green-50" in html

    def test_cons_card(self):
        html = CalloutCard("cons")({"title": "SWR", "cons": ["Another dependency"]})
        assert "You might not use SWR if..." in html
        assert "<span>Another dependency</span>" in html
        assert "bg-red-50" in html

    def test_single_item_string(self):
        html = CalloutCard("pros")({"title": "X", "pros": "Fast"})
        assert "<span>Fast</span>" in html

    def test_no_items(self):
        html = CalloutCard("cons")({"title": "X"})
        assert "You might not use X if..." in html
        assert "<span>" in html

    def test_content_escaped(self):
        html = CalloutCard("pros")({"title": "<script>", "pros": ["a & b"]})
        assert "&lt;script&gt;" in html
        assert "a &amp; b" in html
        assert "<script>" not in html

    def test_title_required(self):
        with pytest.raises(ComponentPropsError):
            CalloutCard("pros")({"pros": ["x"]})

    def test_unknown_variant(self):
        with pytest.raises(ValueError):
            CalloutCard("maybe")

    def test_name(self):
        assert CalloutCard("pros").name == "ProsCard"
        assert CalloutCard("cons").name == "ConsCard"


class TestStep:
    def test_render(self):
        html = Step()({"number": 2, "title": "Deploy"})
        assert ">2</div>" in html
        assert "Deploy</h3>" in html

    def test_number_coerced(self):
        assert ">3</div>" in Step()({"number": "3", "title": "Ship"})

    def test_invalid_props(self):
        with pytest.raises(ComponentPropsError):
            Step()({"number": 1})
        with pytest.raises(ComponentPropsError):
            Step()({"number": "one", "title": "x"})
