"""
Decoding of documents returned by the Firestore REST API.

Every field value there is wrapped into a single-key object naming its type, e.g.
``{"stringValue": "abc"}`` or ``{"arrayValue": {"values": [...]}}``.
"""

from typing import Any


def decode_value(value: dict[str, Any]) -> Any:
    if "nullValue" in value:
        return None
    if "booleanValue" in value:
        return value["booleanValue"]
    if "integerValue" in value:
        # int64 is transferred as a string
        return int(value["integerValue"])
    if "doubleValue" in value:
        return float(value["doubleValue"])
    if "stringValue" in value:
        return value["stringValue"]
    if "timestampValue" in value:
        return value["timestampValue"]
    if "referenceValue" in value:
        return value["referenceValue"]
    if "bytesValue" in value:
        return value["bytesValue"]
    if "geoPointValue" in value:
        return dict(value["geoPointValue"])
    if "arrayValue" in value:
        return [decode_value(v) for v in value["arrayValue"].get("values", [])]
    if "mapValue" in value:
        return decode_fields(value["mapValue"].get("fields", {}))
    raise ValueError(f"Unknown Firestore value: {value}")


def decode_fields(fields: dict[str, dict[str, Any]]) -> dict[str, Any]:
    return {key: decode_value(value) for key, value in fields.items()}


def document_id(document: dict[str, Any]) -> str:
    """Last segment of `projects/{p}/databases/{d}/documents/{collection}/{id}`."""
    return document["name"].rsplit("/", 1)[-1]


def encode_string(value: str) -> dict[str, str]:
    return {"stringValue": value}
