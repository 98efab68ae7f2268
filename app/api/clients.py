"""
app/api/clients.py

Purpose: Client endpoints

- List / search, fetch, create, update, delete
- Deleting a client does not touch its KYC, payments or reminders
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response

from app.core.exceptions import ResourceNotFoundError
from app.db.memory import MemStorage, get_storage
from app.models.client import Client
from app.schemas.client import ClientCreate, ClientUpdate

router = APIRouter(prefix="/clients")


@router.get("", response_model=List[Client])
async def list_clients(
    search: Optional[str] = Query(None, description="Matches name, type, email or contact number"),
    storage: MemStorage = Depends(get_storage),
):
    if search:
        return storage.search_clients(search)
    return storage.get_all_clients()


@router.get("/{client_id}", response_model=Client)
async def get_client(client_id: int, storage: MemStorage = Depends(get_storage)):
    client = storage.get_client(client_id)
    if client is None:
        raise ResourceNotFoundError.for_entity("Client", clientId=client_id)
    return client


@router.post("", response_model=Client, status_code=201)
async def create_client(payload: ClientCreate, storage: MemStorage = Depends(get_storage)):
    return storage.create_client(payload)


@router.put("/{client_id}", response_model=Client)
async def update_client(
    client_id: int,
    payload: ClientUpdate,
    storage: MemStorage = Depends(get_storage),
):
    client = storage.update_client(client_id, payload)
    if client is None:
        raise ResourceNotFoundError.for_entity("Client", clientId=client_id)
    return client


@router.delete("/{client_id}", status_code=204)
async def delete_client(client_id: int, storage: MemStorage = Depends(get_storage)):
    if not storage.delete_client(client_id):
        raise ResourceNotFoundError.for_entity("Client", clientId=client_id)
    return Response(status_code=204)
