# app/routers/machines.py
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from vend_backend.app.deps import get_store
from vend_backend.app.models.fleet import Machine
from vend_backend.app.schemas import MachineCreate, MachineUpdate
from vend_backend.app.services.data_stores import FleetStore

router = APIRouter(prefix="/machines", tags=["machines"])


@router.get("", response_model=List[Machine])
def list_machines(store: FleetStore = Depends(get_store)):
    return store.list_machines()


@router.get("/{machine_id}", response_model=Machine)
def get_machine(machine_id: str, store: FleetStore = Depends(get_store)):
    machine = store.get_machine(machine_id)
    if machine is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Machine not found")
    return machine


@router.post("", response_model=Machine, status_code=status.HTTP_201_CREATED)
def create_machine(payload: MachineCreate, store: FleetStore = Depends(get_store)):
    return store.create_machine(payload)


@router.put("/{machine_id}", response_model=Machine)
def update_machine(machine_id: str, payload: MachineUpdate, store: FleetStore = Depends(get_store)):
    machine = store.update_machine(machine_id, payload)
    if machine is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Machine not found")
    return machine


@router.delete("/{machine_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_machine(machine_id: str, store: FleetStore = Depends(get_store)) -> Response:
    if not store.delete_machine(machine_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Machine not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
