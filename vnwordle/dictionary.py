"""
where the words come from

every provider has a load() that returns a {word: [sense, ...]} dict or
raises DictionaryError. only the keys matter for matching, the senses
(example, sub_pos, definition, pos) are carried along untouched.
"""

import json
import pathlib

import httpx

from . import DICT_URL, HTTP_TIMEOUT, default_cache_path

import logging
logger = logging.getLogger()


class DictionaryError(RuntimeError):
    pass


def check_entries(entries, source):
    if not isinstance(entries, dict):
        raise DictionaryError(f"expected a JSON object from {source}, got {type(entries).__name__}")
    return entries


class MemoryDictionary:

    def __init__(self, entries=None):
        self.entries = dict(entries or {})

    def load(self):
        return self.entries

    def __repr__(self):
        return f"MemoryDictionary({len(self.entries)} words)"


class CacheDictionary:
    """
    the dictionary as a single JSON object on disk
    """

    def __init__(self, path=None):
        self.path = pathlib.Path(path) if path else default_cache_path()

    def load(self):
        try:
            data = self.path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            raise DictionaryError(f"can't read cache {self.path}: {e}") from e

        try:
            entries = json.loads(data)
        except ValueError as e:
            raise DictionaryError(f"corrupt cache {self.path}: {e}") from e

        entries = check_entries(entries, self.path)
        logger.debug(f"read {len(entries)} words from cache {self.path}")
        return entries

    def save(self, entries):
        try:
            self.path.write_text(json.dumps(entries, ensure_ascii=False), encoding='utf-8')
        except OSError as e:
            raise DictionaryError(f"can't write cache {self.path}: {e}") from e

        logger.debug(f"wrote {len(entries)} words to cache {self.path}")

    def __repr__(self):
        return f"CacheDictionary({str(self.path)!r})"


class UrlDictionary:
    """
    fetch the dictionary JSON over http

    client is optional, handy for passing in an httpx.Client with a
    MockTransport
    """

    def __init__(self, url=DICT_URL, timeout=HTTP_TIMEOUT, client=None):
        self.url     = url
        self.timeout = timeout
        self.client  = client

    def _get(self):
        if self.client is not None:
            return self.client.get(self.url, timeout=self.timeout)

        with httpx.Client(timeout=self.timeout, follow_redirects=True) as client:
            return client.get(self.url)

    def load(self):
        logger.debug(f"fetching dictionary from {self.url}")

        try:
            resp = self._get()
            resp.raise_for_status()
            entries = resp.json()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise DictionaryError(f"failed to fetch {self.url}: {e}") from e
        except ValueError as e:
            raise DictionaryError(f"malformed JSON from {self.url}: {e}") from e

        entries = check_entries(entries, self.url)
        logger.debug(f"fetched {len(entries)} words from {self.url}")
        return entries

    def __repr__(self):
        return f"UrlDictionary({self.url!r})"


class CachedDictionary:
    """
    cache first, then the network (rewriting the cache)

    if neither works we carry on with an empty dictionary and say so,
    every query then simply finds nothing
    """

    def __init__(self, cache, remote, refresh=False):
        self.cache   = cache
        self.remote  = remote
        self.refresh = refresh

    def load(self):
        if not self.refresh:
            try:
                return self.cache.load()
            except DictionaryError as e:
                logger.debug(f"cache miss: {e}")

        try:
            entries = self.remote.load()
        except DictionaryError as e:
            logger.warning(f"dictionary unavailable, no words will match: {e}")
            return {}

        try:
            self.cache.save(entries)
        except DictionaryError as e:
            logger.warning(f"couldn't update cache: {e}")

        return entries
