# analytics_viewer/routers/__init__.py

from fastapi import APIRouter

# 1. Importar los routers
from . import report_router

# 2. Crear el router para la API REST con el prefijo v1
api_router = APIRouter(prefix="/api/v1")

# 3. Incluir solo los routers de la API REST
api_router.include_router(report_router.router)

# Las páginas HTML van sin prefijo
page_router = report_router.page_router
