"""Unit tests for description enrichment."""

from spooky_feed.enrichment.description import DescriptionEnricher, Marker


class TestDescriptionEnricher:
    """Tests for DescriptionEnricher."""

    def test_inline_markers(self):
        """Should wrap inline phrases in spans, keeping the text."""
        enricher = DescriptionEnricher()

        result = enricher.enrich("Triggerwarnung: Blut. Quellen: Wikipedia")

        assert '<span class="episode-trigger-warning">Triggerwarnung</span>: Blut.' in result
        assert '<span class="episode-sources">Quellen:</span> Wikipedia' in result

    def test_all_occurrences_wrapped(self):
        result = DescriptionEnricher().enrich("Werbung hier, Werbung dort")
        assert result.count('<span class="episode-ad">Werbung</span>') == 2

    def test_ad_marker_needs_whole_word(self):
        assert DescriptionEnricher().enrich("Werbungsfrei") == "Werbungsfrei"

    def test_social_marker(self):
        result = DescriptionEnricher().enrich("Folgt uns auf Instagram!")
        assert result == '<span class="episode-social">Folgt uns auf Instagram</span>!'

    def test_story_call_to_action_across_line_break(self):
        """Should wrap the two-line call to action in a block element."""
        text = "Du hast selbst etwas Unheimliches erlebt?\nSchreib uns deine Geschichte!"

        result = DescriptionEnricher().enrich(text)

        assert result == f'<div class="episode-story-cta">{text}</div>'

    def test_story_call_to_action_with_br(self):
        text = "Du hast selbst etwas Unheimliches erlebt?<br />\nSchreib uns deine Geschichte!"
        result = DescriptionEnricher().enrich(f"<p>{text}</p>")
        assert result == f'<p><div class="episode-story-cta">{text}</div></p>'

    def test_empty_is_noop(self):
        assert DescriptionEnricher().enrich("") == ""

    def test_no_markers_unchanged(self):
        text = "<p>Eine ganz normale Folge.</p>"
        assert DescriptionEnricher().enrich(text) == text

    def test_custom_markers(self):
        enricher = DescriptionEnricher(markers=[Marker(r"Spoiler", "episode-spoiler")])
        assert enricher.enrich("Spoiler!") == '<span class="episode-spoiler">Spoiler</span>!'
