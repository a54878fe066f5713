"""Teacher resource schemas."""

from __future__ import annotations

from marshmallow import Schema, fields, validate


class TeacherCreateSchema(Schema):
    """Payload for creating a teacher."""

    first_name = fields.String(required=True, validate=validate.Length(min=1, max=100))
    last_name = fields.String(required=True, validate=validate.Length(min=1, max=100))
    email = fields.Email(required=True, validate=validate.Length(max=255))
    phone = fields.String(load_default=None, allow_none=True, validate=validate.Length(max=20))
    subject = fields.String(load_default=None, allow_none=True, validate=validate.Length(max=100))
    school_id = fields.Integer(load_default=None, allow_none=True, strict=True)


class TeacherUpdateSchema(Schema):
    """Partial payload for updating a teacher."""

    first_name = fields.String(validate=validate.Length(min=1, max=100))
    last_name = fields.String(validate=validate.Length(min=1, max=100))
    email = fields.Email(validate=validate.Length(max=255))
    phone = fields.String(allow_none=True, validate=validate.Length(max=20))
    subject = fields.String(allow_none=True, validate=validate.Length(max=100))
    school_id = fields.Integer(allow_none=True, strict=True)


class TeacherSchema(Schema):
    """Public representation of a teacher."""

    id = fields.Integer(required=True)
    first_name = fields.String(required=True)
    last_name = fields.String(required=True)
    email = fields.String(required=True)
    phone = fields.String(allow_none=True)
    subject = fields.String(allow_none=True)
    school_id = fields.Integer(allow_none=True)
    created_at = fields.DateTime(required=True)
    updated_at = fields.DateTime(required=True)
