"""Tests for meeting minutes persistence."""

import pytest

from smart_minutes.exceptions import InvalidInputError, PersistenceError
from smart_minutes.repositories import MinutesRepository

LINKS = {
    "formal_template": "https://drive.test/1",
    "simple_template": "https://drive.test/2",
    "detailed_template": "https://drive.test/3",
}


def test_record_round_trips_through_listing(minutes_repository):
    record = minutes_repository.record("u1", "meeting.mp3", LINKS)

    listed = minutes_repository.list_for_owner("u1")

    assert len(listed) == 1
    assert listed[0].run_id == record.run_id
    assert listed[0].links == LINKS
    assert listed[0].audio_file_name == "meeting.mp3"
    assert listed[0].created_at is not None


def test_records_are_scoped_to_owner(minutes_repository):
    minutes_repository.record("u1", "a.mp3", LINKS)
    minutes_repository.record("u2", "b.mp3", LINKS)

    assert [r.audio_file_name for r in minutes_repository.list_for_owner("u2")] == ["b.mp3"]


def test_owner_without_records_gets_empty_list(minutes_repository):
    assert minutes_repository.list_for_owner("nobody") == []


def test_incomplete_links_are_rejected(minutes_repository):
    links = dict(LINKS, detailed_template="")

    with pytest.raises(InvalidInputError):
        minutes_repository.record("u1", "meeting.mp3", links)

    assert minutes_repository.list_for_owner("u1") == []


def test_blank_owner_is_rejected(minutes_repository):
    with pytest.raises(InvalidInputError):
        minutes_repository.record("", "meeting.mp3", LINKS)


def test_listing_exposes_every_required_field(session_factory):
    writer = MinutesRepository(session_factory, ["formal_template"])
    writer.record("u1", "meeting.mp3", {"formal_template": "https://drive.test/1"})
    reader = MinutesRepository(session_factory, ["formal_template", "simple_template"])

    (record,) = reader.list_for_owner("u1")

    assert record.links == {
        "formal_template": "https://drive.test/1",
        "simple_template": None,
    }


def test_database_failure_is_wrapped():
    def broken_factory():
        raise RuntimeError("connection refused")

    repository = MinutesRepository(broken_factory, ["formal_template"])

    with pytest.raises(PersistenceError) as exc_info:
        repository.record("u1", "meeting.mp3", {"formal_template": "x"})

    assert isinstance(exc_info.value.cause, RuntimeError)
