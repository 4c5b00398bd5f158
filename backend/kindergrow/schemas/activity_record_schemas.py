import marshmallow as ma

from kindergrow.models.activity_record import RawActivityRecord
from kindergrow.models.activity_schema import ActivitySchema
from kindergrow.services.activity_constants import DIAPER_TYPES, FEEDING_TYPES, MAX_SLEEP_HOURS
from kindergrow.services.date_key_extractor import DateKeyExtractor


class ActivityRecordSchema(ma.Schema):
    """
    Base schema for care-log payloads.

    Subclasses declare the domain fields and implement build_metrics(); the
    post_load hook turns a validated payload into a RawActivityRecord with a
    localized date key.
    """
    id = ma.fields.Raw(load_default=None, allow_none=True)
    date = ma.fields.Raw(load_default=None, allow_none=True)
    timestamp = ma.fields.Raw(load_default=None, allow_none=True)

    class Meta:
        unknown = ma.EXCLUDE

    def __init__(self, activity_schema: ActivitySchema, offset_hours: int = 3, **kwargs):
        super().__init__(**kwargs)
        self.activity_schema = activity_schema
        self.offset_hours = offset_hours

    def build_metrics(self, data):
        raise NotImplementedError

    def resolve_date_key(self, data):
        # First date field (in domain precedence order) that yields a valid key
        for field_name in self.activity_schema.date_fields:
            key = DateKeyExtractor.key_for(data.get(field_name), self.offset_hours)
            if key is not None:
                return key
        return None

    @ma.post_load
    def make_record(self, data, **kwargs):
        return RawActivityRecord(
            date_key=self.resolve_date_key(data),
            metrics=self.build_metrics(data),
            record_id=data.get('id')
        )


class SleepRecordSchema(ActivityRecordSchema):
    nap_hours = ma.fields.Float(
        data_key='napHours', load_default=None, allow_none=True,
        validate=ma.validate.Range(min=0, max=MAX_SLEEP_HOURS)
    )
    night_hours = ma.fields.Float(
        data_key='nightHours', load_default=None, allow_none=True,
        validate=ma.validate.Range(min=0, max=MAX_SLEEP_HOURS)
    )
    sleep_progress = ma.fields.Float(
        data_key='sleepProgress', load_default=None, allow_none=True,
        validate=ma.validate.Range(min=0)
    )

    def build_metrics(self, data):
        nap_hours = data.get('nap_hours') or 0
        night_hours = data.get('night_hours') or 0
        return {
            'napHours': nap_hours,
            'nightHours': night_hours,
            'totalHours': nap_hours + night_hours,
            'sleepProgress': data.get('sleep_progress') or 0
        }


class DiaperRecordSchema(ActivityRecordSchema):
    type = ma.fields.String(required=True, validate=ma.validate.OneOf(DIAPER_TYPES))

    def build_metrics(self, data):
        metrics = {diaper_type: 0 for diaper_type in DIAPER_TYPES}
        metrics[data['type']] = 1
        metrics['changes'] = 1
        return metrics


class FeedingRecordSchema(ActivityRecordSchema):
    type = ma.fields.String(required=True, validate=ma.validate.OneOf(FEEDING_TYPES))
    duration = ma.fields.Float(load_default=None, allow_none=True, validate=ma.validate.Range(min=0))
    amount = ma.fields.Float(load_default=None, allow_none=True, validate=ma.validate.Range(min=0))

    def build_metrics(self, data):
        feeding_type = data['type']
        duration = data.get('duration') or 0
        amount = data.get('amount') or 0

        return {
            # Breast feeds are measured in minutes, bottle in ml, solids in grams
            'breastMinutes': duration if feeding_type == 'breast' else 0,
            'bottleMl': amount if feeding_type == 'bottle' else 0,
            'solidGrams': amount if feeding_type == 'solid' else 0,
            'breastCount': 1 if feeding_type == 'breast' else 0,
            'bottleCount': 1 if feeding_type == 'bottle' else 0,
            'solidCount': 1 if feeding_type == 'solid' else 0,
            'feedings': 1
        }
