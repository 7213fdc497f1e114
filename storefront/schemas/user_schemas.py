from pydantic import BaseModel
from typing import Optional


class AccountUpdateRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
