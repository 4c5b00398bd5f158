import marshmallow as ma

from kindergrow.services.activity_constants import PERIODS


class PeriodSelectionSchema(ma.Schema):
    """Validates a chart period selection such as {'period': 'month', 'year': 2024, 'month': 2}."""
    period = ma.fields.String(required=True, validate=ma.validate.OneOf(PERIODS))
    year = ma.fields.Int(load_default=None, allow_none=True, validate=ma.validate.Range(min=1, max=9999))
    month = ma.fields.Int(load_default=None, allow_none=True, validate=ma.validate.Range(min=1, max=12))
    reference_date = ma.fields.Date(load_default=None, allow_none=True)

    class Meta:
        unknown = ma.EXCLUDE
