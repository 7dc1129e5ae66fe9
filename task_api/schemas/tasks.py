# COMPONENT: API SCHEMAS AND DATA MODELS
# REQUIREMENTS SATISFIED: OpenAPI request/response schemas, PUT field validation
"""
task_api/schemas/tasks.py

Pydantic models describing the /tasks contract.

Records are schema-less: the store keeps whatever JSON object the client
sends. These models exist for two reasons:

    - TaskReplace is the validation applied to PUT bodies (non-empty
      title and describe strings, boolean isCompleted). Extra fields are
      allowed and kept.
    - The remaining models only feed the generated OpenAPI document served
      at /api-docs. Routes return plain dicts so arbitrary client fields
      survive the round trip untouched.
"""
from __future__ import annotations
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr


class TaskBase(BaseModel):
    model_config = ConfigDict(extra="allow")

    title: Optional[str] = Field(None, examples=["Comprar pão"])
    describe: Optional[str] = Field(None, examples=["Passar na padaria às 8h"])
    isCompleted: Optional[bool] = Field(None, examples=[False])


class TaskReplace(BaseModel):
    model_config = ConfigDict(extra="allow")

    title: StrictStr = Field(..., min_length=1)
    describe: StrictStr = Field(..., min_length=1)
    isCompleted: StrictBool


class TaskOut(TaskBase):
    id: str = Field(..., examples=["1"])


class MessageOut(BaseModel):
    message: str


class ErrorOut(BaseModel):
    error: str


class CollisionItem(BaseModel):
    id: str
    error: str


class BatchErrorOut(BaseModel):
    errors: List[CollisionItem]


TaskBase.model_rebuild()
TaskReplace.model_rebuild()
TaskOut.model_rebuild()
MessageOut.model_rebuild()
ErrorOut.model_rebuild()
CollisionItem.model_rebuild()
BatchErrorOut.model_rebuild()
