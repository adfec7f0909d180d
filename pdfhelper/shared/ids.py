"""ID generation helpers."""

import uuid


def generate_request_id() -> str:
    """Generate a short request id for log correlation."""
    return f"req_{uuid.uuid4().hex[:16]}"
