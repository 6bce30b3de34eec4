# marketplace/schemas/common.py
import datetime as dt
from pydantic import BaseModel

__all__ = ["MessageOut", "iso_utc"]

class MessageOut(BaseModel):
    """Body for plain acknowledgements and every error response."""
    message: str

def iso_utc(ts: dt.datetime) -> str:
    """Render a timestamp as ISO-8601 UTC with a trailing ``Z``."""
    if ts.tzinfo is not None:
        ts = ts.astimezone(dt.timezone.utc).replace(tzinfo=None)
    return ts.isoformat() + "Z"
