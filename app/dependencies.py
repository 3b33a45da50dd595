# app/dependencies.py

# Inyeccion de dependencias
from typing import Annotated
from fastapi import Depends, Request

from app.config import Config
from app.internal.integrations.supabase import SupabaseClient


def get_config(request: Request) -> Config:
    """La configuración se entrega a la aplicación en create_app y se guarda en app.state."""
    return request.app.state.config


ConfigDep = Annotated[Config, Depends(get_config)]


def get_supabase_client(config: ConfigDep) -> SupabaseClient:
    return SupabaseClient(config)


SupabaseClientDep = Annotated[SupabaseClient, Depends(get_supabase_client)]
