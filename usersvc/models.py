"""
Data model shared by the provider and the consumer client.

The JSON shape produced here is the wire contract between both sides:

    {"id": 10, "firstName": "...", "lastName": "...", "username": "sally", "type": "admin"}

Python code uses snake_case field names; the camelCase aliases are what goes
over the wire. Models are frozen so records stay immutable once seeded.
"""

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """A single user record."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: int
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    username: str
    user_type: str = Field(alias="type")

    def to_wire(self) -> dict:
        """Return the JSON-ready dict using wire field names."""
        return self.model_dump(by_alias=True)
