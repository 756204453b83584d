from datetime import datetime
from bson import ObjectId


def serialize_doc(obj):
    """Make a Mongo document JSON safe (ObjectId and datetime become strings)."""
    if isinstance(obj, ObjectId):
        return str(obj)
    elif isinstance(obj, datetime):
        return obj.isoformat()
    elif isinstance(obj, dict):
        return {k: serialize_doc(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [serialize_doc(i) for i in obj]
    return obj
