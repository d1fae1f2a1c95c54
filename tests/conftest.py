"""Pytest configuration and shared fixtures."""

import pytest

# Add project root to path
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from spooky_feed.config.settings import Settings
from spooky_feed.ingestion.interfaces import FetcherInterface


PRIMARY_URL = "https://feeds.test/spooky-bitch-show.rss"
EXTERNAL_URL = "https://feeds.test/podfluencer.rss"
BASE_URL = "https://spooky.test"


PRIMARY_FEED_XML = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" xmlns:itunes="http://www.itunes.com/dtds/podcast-1.0.dtd">
  <channel>
    <title>Spooky Bitch Show</title>
    <description><![CDATA[Der Grusel und Mystery Podcast]]></description>
    <link>https://0666sbs.podcaster.de</link>
    <item>
      <title><![CDATA[#12 Das Haus am See]]></title>
      <link>https://0666sbs.podcaster.de/12</link>
      <description><![CDATA[<p>Triggerwarnung: Gewalt</p><p>Du hast selbst etwas Unheimliches erlebt?<br/>Schreib uns deine Geschichte!</p>]]></description>
      <pubDate>Mon, 15 Jan 2024 20:00:00 +0100</pubDate>
      <guid isPermaLink="false">sbs-12</guid>
      <itunes:duration>1:05:33</itunes:duration>
      <enclosure url="https://cdn.test/sbs-12.mp3" length="1024" type="audio/mpeg"/>
      <itunes:image href="https://cdn.test/covers/halloween_cover.jpg"/>
    </item>
    <item>
      <title>#11 Der Wendigo</title>
      <link>https://0666sbs.podcaster.de/11</link>
      <description>&lt;p&gt;Werbung: Danke an unseren Sponsor&lt;/p&gt;</description>
      <pubDate>Mon, 08 Jan 2024 20:00:00 +0100</pubDate>
      <guid isPermaLink="false">sbs-11</guid>
      <itunes:duration>45:07</itunes:duration>
      <enclosure url="https://cdn.test/sbs-11.mp3?a=1&amp;b=2" length="2048" type="audio/mpeg"/>
      <itunes:image href="https://cdn.test/covers/Creature.png"/>
    </item>
    <item>
      <title>Bonus: Q&amp;A Spezial</title>
      <description>Eure Fragen</description>
      <pubDate>Mon, 01 Jan 2024 12:00:00 GMT</pubDate>
      <duration>12:30</duration>
      <enclosure url="https://cdn.test/bonus.mp3" length="512" type="audio/mpeg"/>
    </item>
  </channel>
</rss>
"""


EXTERNAL_FEED_XML = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" xmlns:itunes="http://www.itunes.com/dtds/podcast-1.0.dtd">
  <channel>
    <title>Die Podfluencer</title>
    <description>Podcasts über Podcasts</description>
    <item>
      <title>Die Podfluencer Show #40</title>
      <description>Nicht unsere Folge</description>
      <pubDate>Fri, 12 Jan 2024 10:00:00 +0100</pubDate>
      <guid>pf-40</guid>
      <itunes:duration>30:00</itunes:duration>
      <enclosure url="https://cdn.test/pf-40.mp3" type="audio/mpeg"/>
    </item>
    <item>
      <title>Spooky Bitch Show Crossover</title>
      <description>Zu Gast bei den Podfluencern</description>
      <pubDate>Wed, 10 Jan 2024 10:00:00 +0100</pubDate>
      <guid>pf-41</guid>
      <itunes:duration>58:03</itunes:duration>
      <enclosure url="https://cdn.test/pf-41.mp3" type="audio/mpeg"/>
      <itunes:image href="https://cdn.test/pf/halloween.jpg"/>
    </item>
    <item>
      <title>Spooky Bitch Show #12 Das Haus am See</title>
      <description>Doppelt veröffentlicht</description>
      <pubDate>Mon, 15 Jan 2024 20:00:00 +0100</pubDate>
      <guid>sbs-12</guid>
      <itunes:duration>1:05:33</itunes:duration>
      <enclosure url="https://cdn.test/pf-sbs-12.mp3" type="audio/mpeg"/>
    </item>
  </channel>
</rss>
"""


class FakeFetcher(FetcherInterface):
    """In-memory fetcher. Values may be XML strings or exceptions to raise."""

    def __init__(self, responses: dict):
        self.responses = responses
        self.calls = []

    async def fetch_text(self, config) -> str:
        self.calls.append(config.url)
        result = self.responses.get(config.url)
        if isinstance(result, Exception):
            raise result
        if result is None:
            raise ConnectionError(f"No route to {config.url}")
        return result


@pytest.fixture
def test_settings():
    """Settings pointing at both test feeds."""
    return Settings(
        primary_feed_url=PRIMARY_URL,
        secondary_feed_url=EXTERNAL_URL,
        site_base_url=BASE_URL,
    )


@pytest.fixture
def primary_only_settings():
    """Settings without an external feed."""
    return Settings(
        primary_feed_url=PRIMARY_URL,
        secondary_feed_url=None,
        site_base_url=BASE_URL,
    )


@pytest.fixture
def primary_xml():
    return PRIMARY_FEED_XML


@pytest.fixture
def external_xml():
    return EXTERNAL_FEED_XML


@pytest.fixture
def fake_fetcher():
    """Fetcher serving both feeds successfully."""
    return FakeFetcher({
        PRIMARY_URL: PRIMARY_FEED_XML,
        EXTERNAL_URL: EXTERNAL_FEED_XML,
    })


@pytest.fixture
def make_fetcher():
    """Factory for fetchers with custom responses, keyed by URL."""
    return FakeFetcher
