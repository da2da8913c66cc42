"""Staff record model."""

from typing import Any, Dict, Optional
from pydantic import BaseModel


class StaffImage(BaseModel):
    """Image custom field of a staff record."""

    url: str = ""
    alt: str = ""


class StaffRecord(BaseModel):
    """Staff member as stored in the staff content type's custom fields."""

    id: int
    full_name: str = ""
    position: str = ""
    write_up: str = ""
    image: Optional[StaffImage] = None
    menu_order: int = 0

    @classmethod
    def from_fields(cls, record_id: int, fields: Dict[str, Any], menu_order: int = 0) -> "StaffRecord":
        """Build a record from a custom-field mapping.

        Image fields arrive either as an attachment dict with a ``url`` key
        or as a bare URL string. Missing fields stay empty.
        """
        image = fields.get("image")
        if isinstance(image, str):
            image = {"url": image}
        elif not isinstance(image, dict):
            image = None

        return cls(
            id=record_id,
            full_name=fields.get("full_name") or "",
            position=fields.get("position") or "",
            write_up=fields.get("write_up") or "",
            image=image,
            menu_order=menu_order,
        )
