"""Id generation for planned documents."""

import uuid


def generate_uuid_prefix(prefix: str) -> str:
    """Generate a unique id with prefix, e.g. doc_<hex>."""
    return f"{prefix}_{uuid.uuid4().hex[:24]}"


def generate_document_id() -> str:
    """Generate a fresh document id. Never reused across planning calls."""
    return generate_uuid_prefix("doc")
