"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
NetClient, a product of Garudex Labs

Unit tests for structured mapping.
"""

from typing import List, Optional

import pytest

from netclient.core.mapping import ImmutableMappable, Map, Mappable, MappingError


class Owner(ImmutableMappable):
    def __init__(self, name: str, tags: List[str], nickname: Optional[str]) -> None:
        self.name = name
        self.tags = tags
        self.nickname = nickname

    @classmethod
    def from_map(cls, map: Map) -> "Owner":
        return cls(
            name=map.value("profile.name", str),
            tags=map.value("tags", List[str]),
            nickname=map.get("nickname"),
        )


class Settings(Mappable):
    def __init__(self) -> None:
        self.theme = "light"
        self.retries = 0

    def mapping(self, map: Map) -> None:
        self.theme = map.get("theme", self.theme)
        self.retries = map.get("retries", self.retries)


class TestMap:
    """Test the read-only JSON view."""

    def test_requires_object(self):
        """Test only JSON objects can be wrapped."""
        with pytest.raises(MappingError):
            Map([1, 2])

    def test_get_and_contains(self):
        """Test lenient lookups."""
        map = Map({"a": 1, "b": None})

        assert map.get("a") == 1
        assert map.get("missing", "fallback") == "fallback"
        assert "a" in map
        assert "b" in map
        assert "missing" not in map

    def test_dotted_paths(self):
        """Test nested values are reachable with dotted keys."""
        map = Map({"owner": {"profile": {"name": "ada"}}})

        assert map.value("owner.profile.name") == "ada"
        assert "owner.profile" in map
        assert "owner.profile.age" not in map
        assert map.get("owner.name.first") is None

    def test_value_missing_raises(self):
        """Test strict lookups fail for missing keys."""
        with pytest.raises(MappingError, match="title"):
            Map({}).value("title")

    def test_value_validates_type(self):
        """Test strict lookups validate against the requested type."""
        map = Map({"id": "12", "name": 5})

        assert map.value("id", int) == 12
        with pytest.raises(MappingError):
            map.value("name", List[int])


class TestMappable:
    """Test the mutable convention."""

    def test_build_fills_fields(self):
        """Test build creates then fills the object."""
        settings = Settings.build(Map({"theme": "dark"}))

        assert settings.theme == "dark"
        assert settings.retries == 0

    def test_create_refusal(self):
        """Test build fails when create returns None."""

        class Refusing(Settings):
            @classmethod
            def create(cls, map):
                return None

        with pytest.raises(MappingError):
            Refusing.build(Map({}))

    def test_mapping_is_abstract(self):
        """Test subclasses must implement mapping()."""

        class Incomplete(Mappable):
            pass

        with pytest.raises(TypeError):
            Incomplete()


class TestImmutableMappable:
    """Test the immutable convention."""

    def test_build(self):
        """Test from_map builds the object."""
        owner = Owner.build(Map({"profile": {"name": "ada"}, "tags": ["x"]}))

        assert owner.name == "ada"
        assert owner.tags == ["x"]
        assert owner.nickname is None

    def test_build_missing_value(self):
        """Test a missing required value fails construction."""
        with pytest.raises(MappingError):
            Owner.build(Map({"tags": []}))
