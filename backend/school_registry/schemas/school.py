"""School resource schemas."""

from __future__ import annotations

from marshmallow import Schema, fields, validate


class SchoolCreateSchema(Schema):
    """Payload for creating a school."""

    name = fields.String(required=True, validate=validate.Length(min=1, max=255))
    address = fields.String(load_default=None, allow_none=True, validate=validate.Length(max=500))
    phone = fields.String(load_default=None, allow_none=True, validate=validate.Length(max=20))
    email = fields.Email(load_default=None, allow_none=True, validate=validate.Length(max=255))


class SchoolUpdateSchema(Schema):
    """Partial payload for updating a school; omitted keys are left untouched."""

    name = fields.String(validate=validate.Length(min=1, max=255))
    address = fields.String(allow_none=True, validate=validate.Length(max=500))
    phone = fields.String(allow_none=True, validate=validate.Length(max=20))
    email = fields.Email(allow_none=True, validate=validate.Length(max=255))


class SchoolSchema(Schema):
    """Public representation of a school."""

    id = fields.Integer(required=True)
    name = fields.String(required=True)
    address = fields.String(allow_none=True)
    phone = fields.String(allow_none=True)
    email = fields.String(allow_none=True)
    created_at = fields.DateTime(required=True)
    updated_at = fields.DateTime(required=True)
