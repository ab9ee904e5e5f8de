"""
Script para iniciar el servidor mock de productos.

Uso:
    python -m scripts.start_mock_server

    # O con uvicorn directamente:
    uvicorn app.main:app --host 127.0.0.1 --port 4010 --reload
"""

import sys
import os

# Agregar raíz del proyecto al path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import uvicorn
from config.settings import settings
from config.logging_config import setup_logging


def main():
    """Iniciar servidor mock."""
    setup_logging(service_name="mock_server")

    print(f"""
╔═══════════════════════════════════════════════════════════════╗
║                    Productos Mock API                         ║
╠═══════════════════════════════════════════════════════════════╣
║  Host:     {settings.mock_server.MOCK_HOST:<15}                              ║
║  Port:     {settings.mock_server.MOCK_PORT:<15}                              ║
║  Seed:     {str(settings.mock_server.MOCK_SEED_DATA):<15}                              ║
╠═══════════════════════════════════════════════════════════════╣
║  Docs:      http://{settings.mock_server.MOCK_HOST}:{settings.mock_server.MOCK_PORT}/docs                 ║
║  Productos: http://{settings.mock_server.MOCK_HOST}:{settings.mock_server.MOCK_PORT}/productos            ║
╚═══════════════════════════════════════════════════════════════╝
    """)

    uvicorn.run(
        "app.main:app",
        host=settings.mock_server.MOCK_HOST,
        port=settings.mock_server.MOCK_PORT,
        reload=settings.general.DEBUG,
        reload_excludes=["logs", "*.log", "logs/**"],
        log_level=settings.general.LOG_LEVEL.lower(),
        access_log=True
    )


if __name__ == "__main__":
    main()
