"""Role request schemas"""

from pydantic import BaseModel, field_validator

from ...models import Role


class RoleRequestCreate(BaseModel):
    requestedRole: Role
    reason: str

    @field_validator("reason")
    @classmethod
    def check_reason(cls, v):
        if not v or not v.strip():
            raise ValueError("Explain why you need this role change")
        return v.strip()
