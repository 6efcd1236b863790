# views/notifications.py
from pydantic import BaseModel, ConfigDict


class Notification(BaseModel):
    """Transient toast shown once at the top of a page."""
    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    variant: str = "default"  # "default" or "destructive"

    @classmethod
    def error(cls, title: str, description: str) -> "Notification":
        return cls(title=title, description=description, variant="destructive")
