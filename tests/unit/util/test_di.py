"""Unit tests for provider selection and test container wiring."""

import pytest

from blog.util.di import (
    PROVIDERS,
    PersistenceProvider,
    ProdConfigProvider,
    ProdPersistenceProvider,
    get_provider,
)
from tests.di import MockPersistenceProvider, build_test_container


class TestGetProvider:
    """Tests for get_provider."""

    def test_concrete_provider_is_returned_as_is(self):
        assert get_provider(ProdConfigProvider) is ProdConfigProvider

    def test_production_persistence(self):
        assert get_provider(PersistenceProvider) is ProdPersistenceProvider

    def test_mock_persistence(self):
        assert get_provider(PersistenceProvider, use_mock=True) is MockPersistenceProvider

    def test_persistence_is_the_only_mockable_component(self):
        mockable = [p for p in PROVIDERS if p.__subclasses__()]

        assert mockable == [PersistenceProvider]


class TestBuildTestContainer:
    """Tests for build_test_container."""

    def test_unknown_component_is_rejected(self):
        with pytest.raises(ValueError, match="Unknown components"):
            build_test_container(unmock={"search"})
