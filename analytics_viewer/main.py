# analytics_viewer/main.py

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from analytics_viewer import __version__
from analytics_viewer.core import logger, settings
from analytics_viewer.core.discord_logger import send_discord_alert
from analytics_viewer.routers import api_router, page_router


api_description = """
Visor de reportes de analítica energética.

Pide el reporte al servicio de analítica y lo dibuja según su periodo
(día, semana o mes): tarjetas de resumen, tendencias, barras comparativas,
perfil de carga de 24 horas y mapa de calor de consumo.

## Endpoints

* `GET /`: formulario y último reporte recibido.
* `POST /reports`: envía el formulario y genera el reporte.
* `POST /api/v1/reports/render`: payload JSON → fragmento HTML.
* `POST /api/v1/reports/view`: payload JSON → métricas derivadas en JSON.
"""

@asynccontextmanager
async def lifespan(app: FastAPI):
    # --- Arranque ---
    logger.info(f"🚀 Iniciando visor de reportes (servicio: {settings.ANALYTICS_API_BASE_URL})")

    yield

    # --- Cierre ---
    logger.info("🛑 Deteniendo visor de reportes...")


app = FastAPI(
    title="Energy Analytics Report Viewer",
    description=api_description,
    version=__version__,
    lifespan=lifespan
)


# --- Middleware CORS ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- Routers ---
app.include_router(page_router)
app.include_router(api_router)


@app.get("/health", tags=["Root"])
def health_check():
    return {"status": "ok", "version": __version__}


# --- Manejo global de errores ---
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    message = f"Error 500 en {request.url.path}: {exc}"
    logger.exception(message)
    send_discord_alert(message, level="CRITICAL", context={"path": request.url.path})
    return JSONResponse(
        status_code=500,
        content={"detail": "Error interno del servidor."}
    )
