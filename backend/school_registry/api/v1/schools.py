"""School endpoints."""

from __future__ import annotations

from flask import Blueprint

from school_registry.api.deps import json_body, json_response, parse_pagination, resolve, timing
from school_registry.schemas import (
    SchoolCreateSchema,
    SchoolSchema,
    SchoolUpdateSchema,
    build_meta,
)
from school_registry.services import SchoolService

bp = Blueprint("schools", __name__)

school_schema = SchoolSchema()
school_list_schema = SchoolSchema(many=True)
school_create_schema = SchoolCreateSchema()
school_update_schema = SchoolUpdateSchema()


@bp.get("")
@timing
def list_schools():
    """Return paginated schools."""

    pagination = parse_pagination()
    page = resolve(SchoolService).list(pagination)
    meta = build_meta(total=page.total, page=page.page, limit=page.limit)
    return json_response({"data": school_list_schema.dump(page.items), "meta": meta})


@bp.get("/<int:school_id>")
@timing
def get_school(school_id: int):
    school = resolve(SchoolService).get(school_id)
    return json_response({"data": school_schema.dump(school)})


@bp.post("")
@timing
def create_school():
    payload = school_create_schema.load(json_body())
    school = resolve(SchoolService).create(payload)
    return json_response({"data": school_schema.dump(school)}, status=201)


@bp.put("/<int:school_id>")
@timing
def update_school(school_id: int):
    payload = school_update_schema.load(json_body())
    school = resolve(SchoolService).update(school_id, payload)
    return json_response({"data": school_schema.dump(school)})


@bp.delete("/<int:school_id>")
@timing
def delete_school(school_id: int):
    resolve(SchoolService).delete(school_id)
    return "", 204
