"""Base DTO class."""

from pydantic import BaseModel, ConfigDict


class DTO(BaseModel):
    """Immutable base for data read from (or published about) the vehicle backend."""

    # Backend rows often carry padded strings ("Toyota ")
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)
