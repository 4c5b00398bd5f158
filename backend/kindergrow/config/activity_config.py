import json
import os

from kindergrow.models.activity_schema import ActivitySchema

class ActivityConfig:
    def __init__(self, config_path=None):
        if config_path is None:
            config_path = os.path.join(os.path.dirname(__file__), 'activity_schemas.json')
        with open(config_path, 'r') as f:
            raw_schemas = json.load(f)

        self.schemas = {
            name: ActivitySchema.from_dict(name, data)
            for name, data in raw_schemas.items()
        }

    def get_schema(self, domain):
        #Get schema for specific activity domain
        schema = self.schemas.get(domain)
        if schema is None:
            raise ValueError(
                f"Unknown activity domain: {domain}. "
                f"Expected one of: {', '.join(sorted(self.schemas))}"
            )
        return schema

    def get_all_schemas(self):
        #Get all activity schemas
        return self.schemas

    @property
    def domains(self):
        return list(self.schemas.keys())

# Global instance
activity_config = ActivityConfig()
