"""Teacher endpoints."""

from __future__ import annotations

from flask import Blueprint

from school_registry.api.deps import json_body, json_response, parse_pagination, resolve, timing
from school_registry.schemas import (
    TeacherCreateSchema,
    TeacherSchema,
    TeacherUpdateSchema,
    build_meta,
)
from school_registry.services import TeacherService

bp = Blueprint("teachers", __name__)

teacher_schema = TeacherSchema()
teacher_list_schema = TeacherSchema(many=True)
teacher_create_schema = TeacherCreateSchema()
teacher_update_schema = TeacherUpdateSchema()


@bp.get("")
@timing
def list_teachers():
    """Return paginated teachers."""

    pagination = parse_pagination()
    page = resolve(TeacherService).list(pagination)
    meta = build_meta(total=page.total, page=page.page, limit=page.limit)
    return json_response({"data": teacher_list_schema.dump(page.items), "meta": meta})


@bp.get("/school/<int:school_id>")
@timing
def list_teachers_by_school(school_id: int):
    """Return every teacher affiliated with ``school_id``."""

    teachers = resolve(TeacherService).list_by_school(school_id)
    return json_response({"data": teacher_list_schema.dump(teachers)})


@bp.get("/<int:teacher_id>")
@timing
def get_teacher(teacher_id: int):
    teacher = resolve(TeacherService).get(teacher_id)
    return json_response({"data": teacher_schema.dump(teacher)})


@bp.post("")
@timing
def create_teacher():
    payload = teacher_create_schema.load(json_body())
    teacher = resolve(TeacherService).create(payload)
    return json_response({"data": teacher_schema.dump(teacher)}, status=201)


@bp.put("/<int:teacher_id>")
@timing
def update_teacher(teacher_id: int):
    payload = teacher_update_schema.load(json_body())
    teacher = resolve(TeacherService).update(teacher_id, payload)
    return json_response({"data": teacher_schema.dump(teacher)})


@bp.delete("/<int:teacher_id>")
@timing
def delete_teacher(teacher_id: int):
    resolve(TeacherService).delete(teacher_id)
    return "", 204
