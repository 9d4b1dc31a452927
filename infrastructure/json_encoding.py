import json
from datetime import datetime
from decimal import Decimal

import simplejson


class CustomJSONEncoder(json.JSONEncoder):
    def default(self, o):
        if isinstance(o, datetime):
            return o.isoformat()
        if isinstance(o, Decimal):
            return str(o)
        return super().default(o)


def dumps(data) -> str:
    return json.dumps(data, ensure_ascii=False, cls=CustomJSONEncoder)


def plain_decimal(value: Decimal) -> str:
    """Fixed-point text for a Decimal, never scientific notation."""
    return format(value, "f")


def dumps_payload(data) -> str:
    """Serialize a request body, writing Decimal values as JSON numbers digit for digit."""
    return simplejson.dumps(data, use_decimal=True)
