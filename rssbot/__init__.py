"""
RSS Bot - Poll RSS feeds and report newly published items.

A small Python application that polls a configured set of RSS feeds
on a fixed interval and prints every entry it has not seen before.
"""

__version__ = "1.0.0"
