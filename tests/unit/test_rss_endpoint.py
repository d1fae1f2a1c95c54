"""Unit tests for the RSS passthrough."""

import re

import pytest
from lxml import etree

from spooky_feed.models import PodcastFeed
from spooky_feed.pipeline.aggregator import FeedAggregator
from spooky_feed.web.rss_endpoint import (
    RSS_CONTENT_TYPE,
    build_slug_map,
    episode_url,
    error_response,
    generate_rss_response,
    rewrite_item_links,
)


def item_links(xml):
    root = etree.fromstring(xml.encode("utf-8"))
    return [item.findtext("link") for item in root.iter("item")]


class TestRewriteItemLinks:
    """Tests for rewrite_item_links."""

    def test_replaces_existing_link(self):
        xml = "<rss><channel><item><title>A</title><guid>g1</guid><link>https://old</link></item></channel></rss>"

        result = rewrite_item_links(xml, {"g1": "a-slug"}, "https://spooky.test")

        assert "<link>https://spooky.test/episode/a-slug</link>" in result
        assert "https://old" not in result

    def test_inserts_link_after_title(self):
        xml = "<rss><channel><item><title>Neue Folge</title><guid>x</guid></item></channel></rss>"

        result = rewrite_item_links(xml, {}, "https://spooky.test")

        assert "<title>Neue Folge</title>\n    <link>https://spooky.test/episode/neue-folge</link><guid>" in result

    def test_title_lookup_decodes_entities(self):
        xml = "<rss><channel><item><title>Q&amp;A</title></item></channel></rss>"

        result = rewrite_item_links(xml, {"Q&A": "mapped"}, "")

        assert "<link>/episode/mapped</link>" in result

    def test_title_lookup_ignores_comments(self):
        xml = "<rss><channel><item><title>#3 Das <!-- draft -->Haus</title></item></channel></rss>"

        result = rewrite_item_links(xml, {"#3 Das Haus": "3-das-haus"}, "")

        assert "<link>/episode/3-das-haus</link>" in result

    def test_channel_link_untouched(self):
        xml = "<rss><channel><link>https://home</link><item><title>A</title></item></channel></rss>"

        result = rewrite_item_links(xml, {}, "https://spooky.test")

        assert "<channel><link>https://home</link>" in result

    def test_item_without_slug_unchanged(self):
        xml = "<rss><channel><item><title>?!</title><link>https://old</link></item></channel></rss>"
        assert rewrite_item_links(xml, {}, "https://spooky.test") == xml

    def test_episode_url_strips_trailing_slash(self):
        assert episode_url("https://spooky.test/", "x") == "https://spooky.test/episode/x"
        assert episode_url("", "x") == "/episode/x"

    def test_slug_map_skips_empty_keys(self, primary_xml, test_settings):
        feed = FeedAggregator(config=test_settings).assemble(primary_xml)

        slug_map = build_slug_map(feed)

        assert slug_map["sbs-12"] == "12-das-haus-am-see"
        assert slug_map["#11 Der Wendigo"] == "11-der-wendigo"
        assert "" not in slug_map
        assert build_slug_map(PodcastFeed("t", "d")) == {}


class TestGenerateRSSResponse:
    """Tests for generate_rss_response."""

    @pytest.mark.asyncio
    async def test_rewrites_all_items(self, test_settings, fake_fetcher):
        response = await generate_rss_response(config=test_settings, fetcher=fake_fetcher)

        assert response.status == 200
        assert response.headers["Content-Type"] == RSS_CONTENT_TYPE
        assert item_links(response.body) == [
            "https://spooky.test/episode/12-das-haus-am-see",
            "https://spooky.test/episode/11-der-wendigo",
            "https://spooky.test/episode/bonus-qa-spezial",
        ]

    @pytest.mark.asyncio
    async def test_keeps_everything_else(self, test_settings, fake_fetcher, primary_xml):
        response = await generate_rss_response(config=test_settings, fetcher=fake_fetcher)

        def without_links(xml):
            return re.sub(r"\s*<link>.*?</link>", "", xml)

        assert without_links(response.body) == without_links(primary_xml)

    @pytest.mark.asyncio
    async def test_fetch_failure_returns_error_document(self, test_settings, make_fetcher):
        response = await generate_rss_response(config=test_settings, fetcher=make_fetcher({}))

        assert response.status == 500
        assert response.headers["Content-Type"] == RSS_CONTENT_TYPE
        assert "<description>Error loading RSS feed</description>" in response.body
        etree.fromstring(response.body.encode("utf-8"))

    def test_error_response_without_base_url(self, test_settings):
        config = test_settings.model_copy(update={"site_base_url": ""})

        response = error_response(config)

        assert "<title>Spooky Bitch Show</title>" in response.body
        assert "<link>/</link>" in response.body
