from marshmallow import Schema, fields, validate

from .services.matrix_service import MENU_CHOICES, OPERATIONS


class ComputeRequestSchema(Schema):
    """Body of POST /api/v1/matrices/compute"""
    operation = fields.String(
        required=True,
        validate=validate.OneOf(list(OPERATIONS) + list(MENU_CHOICES))
    )
    first = fields.String(required=True)
    second = fields.String(required=True)


class UploadFormSchema(Schema):
    """Form fields sent along with the two matrix files"""
    operation = fields.String(
        required=True,
        validate=validate.OneOf(list(OPERATIONS) + list(MENU_CHOICES))
    )
