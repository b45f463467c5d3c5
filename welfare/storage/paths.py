import re
import uuid
from datetime import datetime


def clean_segment(value: str) -> str:
    """Replace anything outside [A-Za-z0-9._-] so names cannot escape the owner folder."""
    cleaned = re.sub(r"[^A-Za-z0-9._-]+", "_", value.strip()).strip(".")
    return cleaned or "document"


def document_path(
    owner_id: str,
    original_name: str,
    uploaded_at: datetime,
    unique: str | None = None,
) -> str:
    """Build destination path: {owner_id}/{epoch_ms}_{unique}_{name}"""
    epoch_ms = int(uploaded_at.timestamp() * 1000)
    token = unique if unique is not None else uuid.uuid4().hex[:12]
    return f"{clean_segment(owner_id)}/{epoch_ms}_{token}_{clean_segment(original_name)}"
