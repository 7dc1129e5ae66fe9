# COMPONENT: TASKS API ROUTES
# REQUIREMENTS SATISFIED: HTTP CRUD surface for the in-memory task store
"""
task_api/api/routers/tasks.py

HTTP routes for /tasks and /tasks/{task_id}.

The handlers are thin: they log the call, hand the parsed JSON body to the
TaskStore owned by the application and return what it gives back. Store
errors (NotFound, InvalidInput, BatchCollision) propagate and are turned into
JSON error responses by the handlers registered in task_api/main.py.

Bodies are typed as plain dicts/lists rather than pydantic models so that
arbitrary client fields are stored and echoed back exactly as sent.
"""
from __future__ import annotations
from typing import Annotated, Any, Dict, List, Union

from fastapi import APIRouter, Body, Depends, Path, Request, Response

from ...repositories.tasks_repo import TaskStore
from ...schemas.tasks import (
    BatchErrorOut,
    ErrorOut,
    MessageOut,
    TaskOut,
    TaskReplace,
)
from ...utils.logging import get_logger

logger = get_logger("tasks")

router = APIRouter(tags=["tasks"])

COLLECTION_ALLOW = "GET, POST, OPTIONS, DELETE, PATCH"
ITEM_ALLOW = "GET, PATCH, PUT, DELETE, OPTIONS"
DELETED_MESSAGE = "Item deletado com sucesso"

_NOT_FOUND = {404: {"model": ErrorOut, "description": "Item não encontrado."}}

TaskId = Annotated[str, Path(description="ID do item")]


def get_store(request: Request) -> TaskStore:
    return request.app.state.store


@router.get(
    "/tasks",
    summary="Retorna todos os itens",
    responses={200: {"model": List[TaskOut], "description": "Lista de itens."}},
)
def list_tasks(store: TaskStore = Depends(get_store)):
    logger.info("GET /tasks")
    return store.list_all()


@router.get(
    "/tasks/{task_id}",
    summary="Retorna um item específico pelo ID",
    responses={200: {"model": TaskOut, "description": "Item encontrado."}, **_NOT_FOUND},
)
def get_task(task_id: TaskId, store: TaskStore = Depends(get_store)):
    logger.info("GET /tasks/%s", task_id)
    return store.get(task_id)


@router.post(
    "/tasks",
    status_code=201,
    summary="Adiciona novos itens",
    responses={
        201: {"description": "Itens adicionados."},
        400: {"model": BatchErrorOut, "description": "Erro ao adicionar itens."},
    },
)
def create_tasks(
    body: Union[List[Dict[str, Any]], Dict[str, Any]] = Body(
        ...,
        openapi_examples={
            "single": {
                "summary": "Um item",
                "value": {"title": "a", "describe": "b", "isCompleted": False},
            },
            "batch": {
                "summary": "Vários itens",
                "value": [
                    {"title": "a", "describe": "b", "isCompleted": False},
                    {"title": "c", "describe": "d", "isCompleted": True},
                ],
            },
        },
    ),
    store: TaskStore = Depends(get_store),
):
    logger.info("POST /tasks")
    if isinstance(body, list):
        return store.create_batch(body)
    return store.create_one(body)


@router.put(
    "/tasks/{task_id}",
    summary="Atualiza uma tarefa pelo ID",
    responses={
        200: {"model": TaskOut, "description": "Tarefa atualizada com sucesso."},
        400: {"model": ErrorOut, "description": "Dados inválidos ou falta de campos obrigatórios."},
        404: {"model": ErrorOut, "description": "Tarefa não encontrada."},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": TaskReplace.model_json_schema()}},
        }
    },
)
def replace_task(
    task_id: TaskId,
    body: Any = Body(None),
    store: TaskStore = Depends(get_store),
):
    logger.info("PUT /tasks/%s", task_id)
    return store.replace_one(task_id, body)


@router.patch(
    "/tasks/{task_id}",
    status_code=201,
    summary="Atualiza um item pelo ID",
    description="Substitui o item inteiro pelo corpo enviado (sem mesclar campos).",
    responses={201: {"model": TaskOut, "description": "Item atualizado com sucesso."}, **_NOT_FOUND},
)
def patch_task(
    task_id: TaskId,
    body: Dict[str, Any] = Body(..., examples=[{"title": "a", "isCompleted": True}]),
    store: TaskStore = Depends(get_store),
):
    logger.info("PATCH /tasks/%s", task_id)
    return store.patch_one(task_id, body)


@router.delete(
    "/tasks/{task_id}",
    summary="Deleta um item pelo ID",
    responses={200: {"model": MessageOut, "description": "Item deletado com sucesso."}, **_NOT_FOUND},
)
def delete_task(task_id: TaskId, store: TaskStore = Depends(get_store)):
    logger.info("DELETE /tasks/%s", task_id)
    store.delete_one(task_id)
    return {"message": DELETED_MESSAGE}


@router.options("/tasks", summary="Retorna os métodos permitidos")
def collection_options():
    return Response(content="OK", media_type="text/plain", headers={"Allow": COLLECTION_ALLOW})


@router.options("/tasks/{task_id}", summary="Retorna os métodos permitidos")
def item_options(task_id: TaskId):
    return Response(content="OK", media_type="text/plain", headers={"Allow": ITEM_ALLOW})
