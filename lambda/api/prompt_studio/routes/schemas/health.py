from pydantic import BaseModel, ConfigDict


class HealthCheckResponse(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    status: str
    message: str
    model_id: str
    structured_output: bool
