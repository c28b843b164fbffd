"""
Main entry point for RSS Bot.

Runs the polling loop that checks every configured feed in turn
and reports newly published items.
"""

import argparse
import asyncio
import logging
import signal
import sys
from urllib.parse import urlparse

import coloredlogs

from rssbot.config import DEFAULT_CONFIG_PATH, AppConfig, FeedConfig, load_config
from rssbot.errors import ConfigError, FetchError
from rssbot.notifier import ConsoleNotifier, NewItem, Notifier
from rssbot.rss_parser import FeedParser
from rssbot.tracker import SeenTracker

logger = logging.getLogger(__name__)


def redact_proxy_url(proxy_url: str) -> str:
    """
    Redact credentials from a proxy URL for safe logging.

    Parameters
    ----------
    proxy_url : str
        The proxy URL potentially containing credentials.

    Returns
    -------
    str
        The proxy URL with password redacted.
    """
    try:
        parsed = urlparse(proxy_url)
        if parsed.password:
            netloc = parsed.hostname or ""
            if parsed.port:
                netloc = f"{netloc}:{parsed.port}"
            if parsed.username:
                netloc = f"{parsed.username}:****@{netloc}"
            return f"{parsed.scheme}://{netloc}{parsed.path}"
        return proxy_url
    except ValueError:
        return "<proxy url>"


class RSSBot:
    """
    Polling loop of the application.

    Checks every configured feed strictly one after another, then
    sleeps for the configured interval, until stopped.
    """

    def __init__(
        self,
        config: AppConfig,
        parser: FeedParser,
        tracker: SeenTracker,
        notifier: Notifier,
    ):
        """
        Initialize the bot.

        Parameters
        ----------
        config : AppConfig
            Loaded application configuration.
        parser : FeedParser
            Fetches and parses feed documents.
        tracker : SeenTracker
            Seen-entry state, owned by this bot for its lifetime.
        notifier : Notifier
            Receives every newly discovered item.
        """
        self.config = config
        self.parser = parser
        self.tracker = tracker
        self.notifier = notifier
        self.cycles = 0
        self._stop_event = asyncio.Event()

    @property
    def interval_seconds(self) -> int:
        """Seconds to wait between two cycles."""
        return self.config.interval_minutes * 60

    async def check_feed(self, feed: FeedConfig) -> list[NewItem]:
        """
        Fetch one feed and report its new entries.

        A failed fetch is logged and leaves the feed's tracking
        state untouched.

        Parameters
        ----------
        feed : FeedConfig
            Feed to check.

        Returns
        -------
        list[NewItem]
            Items reported during this check.
        """
        logger.debug("Checking feed: %s (%s)", feed.name, feed.url)

        try:
            document = await self.parser.fetch(feed.url)
        except FetchError as e:
            logger.warning(
                "Failed to fetch feed '%s' (%s error): %s",
                feed.name,
                e.kind.value,
                e,
            )
            return []

        classified = self.tracker.classify(feed.url, document.entries)

        reported = []
        for item in classified:
            if not item.is_new:
                continue
            new_item = NewItem(
                feed_name=feed.name,
                title=item.entry.title,
                link=item.entry.link,
            )
            await self.notifier.send_item(new_item)
            reported.append(new_item)

        if reported:
            logger.info(
                "Found %d new entr%s in '%s'",
                len(reported),
                "y" if len(reported) == 1 else "ies",
                feed.name,
            )
        else:
            logger.debug("No new entries in feed '%s'", feed.name)

        return reported

    async def run_cycle(self) -> list[NewItem]:
        """
        Check every configured feed once, in configured order.

        Returns
        -------
        list[NewItem]
            Items reported during this cycle, across all feeds.
        """
        reported = []
        for feed in self.config.feeds:
            if self._stop_event.is_set():
                break
            try:
                reported.extend(await self.check_feed(feed))
            except asyncio.CancelledError:
                raise
            except Exception:
                logger.exception("Error checking feed '%s'", feed.name)

        self.cycles += 1
        logger.debug(
            "Cycle %d complete: %d new item(s)", self.cycles, len(reported)
        )
        return reported

    async def run_forever(self) -> None:
        """Run polling cycles until stop() is called."""
        logger.info(
            "Polling %d feed(s) every %d minute(s)",
            len(self.config.feeds),
            self.config.interval_minutes,
        )

        while not self._stop_event.is_set():
            await self.run_cycle()
            if self._stop_event.is_set():
                break
            try:
                await asyncio.wait_for(
                    self._stop_event.wait(), timeout=self.interval_seconds
                )
            except asyncio.TimeoutError:
                pass

    def request_stop(self) -> None:
        """
        Ask the loop to finish.

        Safe to call from a signal handler: the current wait ends and
        no further feed is checked, but resources stay open until
        stop() is awaited.
        """
        self._stop_event.set()

    async def stop(self) -> None:
        """Stop the loop and release resources."""
        logger.info("Stopping RSS Bot")
        self.request_stop()
        await self.parser.close()
        await self.notifier.close()


def setup_logging(verbose: bool = False) -> None:
    """
    Configure application logging.

    Parameters
    ----------
    verbose : bool
        If True, set log level to DEBUG.
    """
    level = logging.DEBUG if verbose else logging.INFO

    coloredlogs.install(
        level=level,
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    logging.getLogger("aiohttp").setLevel(logging.WARNING)


def build_bot(config: AppConfig) -> RSSBot:
    """Construct the bot and its collaborators from configuration."""
    if config.proxy:
        logger.info("Using proxy: %s", redact_proxy_url(config.proxy))

    parser = FeedParser(
        timeout=config.request_timeout,
        user_agent=config.user_agent,
        proxy_url=config.proxy,
    )
    return RSSBot(config, parser, SeenTracker(), ConsoleNotifier())


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Poll RSS feeds and report new items",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "-c",
        "--config",
        default=DEFAULT_CONFIG_PATH,
        help="Path to configuration file",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    args = parser.parse_args()

    setup_logging(args.verbose)
    logger.info("Starting RSS Bot")

    try:
        config = load_config(args.config)
    except ConfigError as e:
        logger.error("Error loading config (%s): %s", e.kind.value, e)
        sys.exit(1)

    for feed in config.feeds:
        logger.info("Watching feed: %s (%s)", feed.name, feed.url)

    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)

    bot = build_bot(config)

    def signal_handler():
        logger.info("Received shutdown signal")
        bot.request_stop()

    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, signal_handler)

    try:
        loop.run_until_complete(bot.run_forever())
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    finally:
        loop.run_until_complete(bot.stop())
        loop.close()


if __name__ == "__main__":
    main()
