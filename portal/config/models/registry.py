"""Student registry configuration models."""

from typing import Literal

from pydantic import BaseModel, Field

BackendType = Literal["inmemory"]


class RegistryConfig(BaseModel):
    """Configuration for the student registry.

    The owner is the only principal allowed to register, update or
    delete records. It is fixed when the portal is constructed.
    """

    owner: str = Field(
        default="admin",
        min_length=1,
        description="Identity of the registry owner",
    )
    backend: BackendType = Field(
        default="inmemory",
        description="Student store backend",
    )
