from pydantic import BaseModel, ConfigDict, Field, StrictStr


class ExtractionRequest(BaseModel):
    """Body de POST /api/infer-tech-stack."""

    model_config = ConfigDict(populate_by_name=True)

    # Sin strip: un texto de solo espacios sigue siendo no vacío
    job_description: StrictStr = Field(..., alias="jobDescription", min_length=1)
