"""
QuickNote Backend — Note Store Unit Tests
===========================================

What:  Tests for NoteStore create/list/delete.
How:   Each test gets an empty store with a fake clock (no HTTP involved).

What we test:
    ✅ Ids are unique and strictly increasing, never reused after delete
    ✅ Blank content is rejected without touching the store
    ✅ Unknown ids are rejected without touching the store
    ✅ Listing is newest first, including same-millisecond saves
"""

import pytest

from quicknote.exceptions import NotFoundError, ValidationError
from quicknote.services.note_store import NoteStore


class TestNoteStoreCreate:
    """Tests for NoteStore.create()."""

    def test_first_note_gets_id_one(self, note_store, fake_clock):
        note = note_store.create("Buy milk")
        assert note.id == 1
        assert note.content == "Buy milk"
        assert note.timestamp == fake_clock.now

    def test_content_is_trimmed(self, note_store):
        note = note_store.create("   Buy milk \n")
        assert note.content == "Buy milk"

    def test_ids_strictly_increase(self, note_store):
        ids = [note_store.create(f"note {i}").id for i in range(5)]
        assert ids == sorted(ids)
        assert len(set(ids)) == 5

    def test_created_note_is_listed(self, note_store):
        note = note_store.create("Call the plumber")
        assert note in note_store.list()

    def test_ids_not_reused_after_delete(self, note_store):
        first = note_store.create("one")
        second = note_store.create("two")
        note_store.delete(second.id)

        third = note_store.create("three")
        assert third.id > second.id > first.id

    @pytest.mark.parametrize("content", ["", "   ", "\n\t  ", None])
    def test_blank_content_rejected(self, note_store, content):
        note_store.create("existing")

        with pytest.raises(ValidationError, match="Content is required"):
            note_store.create(content)

        assert len(note_store) == 1

    def test_rejected_create_does_not_consume_an_id(self, note_store):
        with pytest.raises(ValidationError):
            note_store.create("  ")
        assert note_store.create("real").id == 1

    def test_default_clock_is_epoch_milliseconds(self):
        note = NoteStore().create("timestamped")
        # 2020-01-01 in ms; a seconds-based clock would be far below this
        assert note.timestamp > 1_577_836_800_000


class TestNoteStoreList:
    """Tests for NoteStore.list() ordering."""

    def test_empty_store(self, note_store):
        assert note_store.list() == []
        assert len(note_store) == 0

    def test_newest_first(self, note_store, fake_clock):
        older = note_store.create("older")
        fake_clock.advance(1000)
        newer = note_store.create("newer")

        assert note_store.list() == [newer, older]

    def test_same_millisecond_saves_keep_later_note_first(self, note_store):
        first = note_store.create("first")
        second = note_store.create("second")
        assert first.timestamp == second.timestamp

        assert note_store.list()[0] == second

    def test_latest_save_is_first(self, note_store, fake_clock):
        for i in range(3):
            note_store.create(f"note {i}")
            fake_clock.advance(10)
        latest = note_store.create("latest")

        assert note_store.list()[0] == latest


class TestNoteStoreDelete:
    """Tests for NoteStore.delete()."""

    def test_delete_removes_note(self, note_store):
        note = note_store.create("temporary")
        note_store.delete(note.id)

        assert note_store.list() == []
        with pytest.raises(NotFoundError):
            note_store.get(note.id)

    def test_delete_unknown_id(self, note_store):
        note_store.create("keep me")

        with pytest.raises(NotFoundError, match="Note not found"):
            note_store.delete(999)

        assert [n.content for n in note_store.list()] == ["keep me"]

    def test_delete_twice(self, note_store):
        note = note_store.create("once")
        note_store.delete(note.id)

        with pytest.raises(NotFoundError):
            note_store.delete(note.id)

    def test_delete_leaves_other_notes(self, note_store):
        keep = note_store.create("keep")
        drop = note_store.create("drop")
        note_store.delete(drop.id)

        assert note_store.list() == [keep]
