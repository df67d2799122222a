from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    '''Base model reading and writing the camelCase column names of the store.'''

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def validate_timestamps(date1: datetime, date2: datetime):
    '''Validate that date2 is greater than date1.'''
    if date2 < date1:
        raise ValueError("date2 must be greater than or equal to date1")
