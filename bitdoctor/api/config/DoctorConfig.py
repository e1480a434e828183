"""Doctor configuration."""

from pydantic import BaseModel, ConfigDict, Field


class DoctorConfig(BaseModel):
    """Settings for running diagnoses."""

    model_config = ConfigDict(extra="forbid")

    max_workers: int | None = Field(None, gt=0, description="Threads used to resolve links (None: executor default)")
    components_dir: str = Field("components", min_length=1, description="Components directory inside the scope")
