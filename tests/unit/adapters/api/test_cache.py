"""
Tests unitaires pour ImageCache.

Ces tests verifient:
- lookup/store (miss, hit, remplacement)
- Cles distinctes par palier de taille
- Eviction LRU bornee
- Acces concurrents sans corruption
"""

import threading

import pytest

from moviedb.adapters.api.cache import ImageCache
from moviedb.adapters.api.endpoints import EndpointBuilder
from moviedb.core.value_objects import Descriptor, ImageSize


def key(path: str, size: ImageSize = ImageSize.W500) -> Descriptor:
    return EndpointBuilder("k").image(size, path)


class TestImageCache:
    """Tests pour la classe ImageCache."""

    def test_lookup_returns_none_for_unseen_key(self, image_cache: ImageCache) -> None:
        """lookup() retourne None pour une cle inexistante."""
        assert image_cache.lookup(key("/nope.jpg")) is None

    def test_store_then_lookup(self, image_cache: ImageCache) -> None:
        """store() puis lookup() retourne la valeur stockee."""
        image_cache.store(key("/a.jpg"), "image-a")
        assert image_cache.lookup(key("/a.jpg")) == "image-a"

    def test_store_replaces_previous_value(self, image_cache: ImageCache) -> None:
        """Un second store() sur la meme cle remplace la valeur."""
        image_cache.store(key("/a.jpg"), "v1")
        image_cache.store(key("/a.jpg"), "v2")
        assert image_cache.lookup(key("/a.jpg")) == "v2"
        assert len(image_cache) == 1

    def test_size_tiers_are_cached_independently(self, image_cache: ImageCache) -> None:
        """Le meme chemin a deux paliers occupe deux entrees."""
        image_cache.store(key("/a.jpg", ImageSize.W92), "small")
        image_cache.store(key("/a.jpg", ImageSize.ORIGINAL), "big")
        assert image_cache.lookup(key("/a.jpg", ImageSize.W92)) == "small"
        assert image_cache.lookup(key("/a.jpg", ImageSize.ORIGINAL)) == "big"

    def test_least_recently_used_is_evicted(self) -> None:
        """Au-dela de maxsize, l'entree la moins recemment utilisee part."""
        cache = ImageCache(maxsize=2)
        cache.store(key("/a.jpg"), "a")
        cache.store(key("/b.jpg"), "b")
        cache.lookup(key("/a.jpg"))  # a devient la plus recente
        cache.store(key("/c.jpg"), "c")

        assert key("/b.jpg") not in cache
        assert cache.lookup(key("/a.jpg")) == "a"
        assert cache.lookup(key("/c.jpg")) == "c"

    def test_clear_removes_all_entries(self, image_cache: ImageCache) -> None:
        """clear() supprime toutes les entrees du cache."""
        image_cache.store(key("/a.jpg"), "a")
        image_cache.store(key("/b.jpg"), "b")

        image_cache.clear()

        assert len(image_cache) == 0
        assert image_cache.lookup(key("/a.jpg")) is None

    def test_invalid_maxsize(self) -> None:
        with pytest.raises(ValueError):
            ImageCache(maxsize=0)

    def test_concurrent_access_does_not_corrupt(self) -> None:
        """Des store/lookup entrelaces depuis plusieurs threads restent coherents."""
        cache = ImageCache(maxsize=64)
        keys = [key(f"/{i}.jpg") for i in range(32)]
        errors = []

        def worker(offset: int) -> None:
            try:
                for _ in range(200):
                    for i, k in enumerate(keys):
                        cache.store(k, i)
                        value = cache.lookup(k)
                        assert value is None or value == i
            except AssertionError as e:  # pragma: no cover
                errors.append(e)

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []
        assert len(cache) == 32
        assert all(cache.lookup(k) == i for i, k in enumerate(keys))
