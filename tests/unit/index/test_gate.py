"""Tests for the admission gate."""

from bobindex.index.gate import AdmissionGate
from bobindex.index.store import IndexStore


class TestExists:
    """Tests for AdmissionGate.exists."""

    def test_case_insensitive_match(self, store: IndexStore) -> None:
        """Any casing matches when case sensitivity is off."""
        store.upsert("/mp3/artist/Other_2011", "Other_2011")
        gate = AdmissionGate(store)

        assert gate.exists("Other_2011") is True
        assert gate.exists("other_2011", case_sensitive=False) is True

    def test_case_sensitive_mismatch(self, store: IndexStore) -> None:
        """Different casing does not match when case sensitivity is on."""
        store.upsert("/mp3/artist/Other_2011", "Other_2011")
        gate = AdmissionGate(store)

        assert gate.exists("other_2011", case_sensitive=True) is False
        assert gate.exists("Other_2011", case_sensitive=True) is True

    def test_absent_name(self, store: IndexStore) -> None:
        """An unknown name is admitted."""
        assert AdmissionGate(store).exists("New_Release-2024") is False

    def test_no_side_effects(self, store: IndexStore) -> None:
        """Checking a name never indexes it."""
        AdmissionGate(store).exists("New_Release-2024")
        assert store.count() == 0
