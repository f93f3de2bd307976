import uuid


def generate_resource_id(prefix: str) -> str:
    """
    Opaque identifier of the form ``<prefix>_<32 hex chars>``, e.g. ``job_3f2a...``.
    """
    return f"{prefix}_{uuid.uuid4().hex}"


def generate_job_id() -> str:
    return generate_resource_id("job")
