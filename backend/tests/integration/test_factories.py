"""Entity factories against a live in-memory database."""

from __future__ import annotations

import logging

import pytest
from sqlalchemy.exc import IntegrityError

from school_registry.models import School, Teacher
from school_registry.testing.factories import SUBJECTS


def _fail(*_args, **_kwargs):
    raise RuntimeError("boom")


class TestSchoolFactory:
    def test_create_fills_defaults(self, schools) -> None:
        school = schools.create()

        assert school.id == 1
        assert school.name.startswith("Test School ")
        assert school.email.endswith("@example.com")
        assert school.phone.startswith("+1")
        assert school.created_at is not None

    def test_overrides_win(self, schools) -> None:
        school = schools.create(name="Springfield Elementary", phone=None)

        assert school.name == "Springfield Elementary"
        assert school.phone is None

    def test_create_many_is_ordered_and_distinct(self, schools, count_rows) -> None:
        rows = schools.create_many(3)

        assert [row.id for row in rows] == [1, 2, 3]
        assert [row.name.rsplit("_", 1)[1] for row in rows] == ["0", "1", "2"]
        assert len({row.email for row in rows}) == 3
        assert count_rows(School) == 3

    def test_create_many_applies_overrides_to_every_row(self, schools) -> None:
        rows = schools.create_many(2, address="1 Shared Road")

        assert {row.address for row in rows} == {"1 Shared Road"}

    def test_create_many_zero_and_negative(self, schools, count_rows) -> None:
        assert schools.create_many(0) == []
        with pytest.raises(ValueError):
            schools.create_many(-1)
        assert count_rows(School) == 0

    def test_cleanup_restarts_ids_and_cascades(self, schools, teachers, count_rows) -> None:
        school = schools.create()
        teachers.create(school=school)

        schools.cleanup()

        assert count_rows(School) == 0
        assert count_rows(Teacher) == 0
        assert schools.create().id == 1


class TestTeacherFactory:
    def test_create_fills_defaults(self, teachers) -> None:
        teacher = teachers.create()

        assert teacher.id == 1
        assert teacher.first_name.startswith("Teacher")
        assert teacher.last_name == "Doe"
        assert teacher.subject in SUBJECTS
        assert teacher.school_id is None

    def test_school_override_wins_over_school_id(self, schools, teachers) -> None:
        first, second = schools.create_many(2)

        teacher = teachers.create(school=second, school_id=first.id)

        assert teacher.school_id == second.id

    def test_unpersisted_school_is_rejected(self, teachers) -> None:
        with pytest.raises(ValueError):
            teachers.create(school=School(name="Draft"))

    def test_emails_stay_unique_across_calls(self, teachers) -> None:
        rows = [teachers.create() for _ in range(3)] + teachers.create_many(3)

        assert len({row.email for row in rows}) == 6

    def test_school_relationship_is_usable_after_create(self, schools, teachers) -> None:
        school = schools.create(name="Linked")

        teacher = teachers.create(school=school)
        batch = teachers.create_many(2, school=school)

        assert teacher.school.id == school.id
        assert teacher.school.name == "Linked"
        assert [row.school.id for row in batch] == [school.id, school.id]
        assert teachers.create().school is None

    def test_school_teachers_are_loaded_after_create(self, schools) -> None:
        assert schools.create().teachers == []

    def test_raw_id_passed_as_school_is_rejected(self, schools, teachers, count_rows) -> None:
        school = schools.create()

        with pytest.raises(TypeError, match="school_id="):
            teachers.create(school=school.id)

        assert count_rows(Teacher) == 0

    def test_failed_create_rolls_back_and_propagates(self, teachers, count_rows) -> None:
        teachers.create(email="taken@test.com")

        with pytest.raises(IntegrityError):
            teachers.create(email="taken@test.com")

        assert count_rows(Teacher) == 1

    def test_duplicate_email_rolls_back_the_batch(self, teachers, count_rows) -> None:
        with pytest.raises(IntegrityError):
            teachers.create_many(3, email="same@test.com")

        assert count_rows(Teacher) == 0

    def test_cleanup_falls_back_to_delete_and_reset(
        self, ctx, teachers, count_rows, monkeypatch, caplog
    ) -> None:
        teachers.create_many(2)
        monkeypatch.setattr(ctx.db, "truncate", _fail)

        with caplog.at_level(logging.WARNING):
            teachers.cleanup()

        assert count_rows(Teacher) == 0
        assert teachers.create().id == 1
        assert any(getattr(r, "strategy", None) == "truncate" for r in caplog.records)

    def test_cleanup_never_raises(self, ctx, teachers, monkeypatch, caplog) -> None:
        teachers.create()
        monkeypatch.setattr(ctx.db, "truncate", _fail)
        monkeypatch.setattr(ctx.db, "delete_all", _fail)

        with caplog.at_level(logging.WARNING):
            teachers.cleanup()

        assert "cleanup.exhausted scope=teachers" in caplog.text
