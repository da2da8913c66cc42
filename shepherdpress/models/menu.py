"""Navigation menu model."""

from typing import List
from pydantic import BaseModel


class MenuItem(BaseModel):
    """Entry of the primary navigation menu."""

    title: str
    url: str
    children: List["MenuItem"] = []
