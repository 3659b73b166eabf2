"""
Alina Chat - Application entry point.

Run with:  python -m alina
           uvicorn alina.main:app --reload
"""

import uvicorn
from alina.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "alina.main:app",
        host=settings.app_host,
        port=settings.app_port,
        log_level=settings.log_level,
    )
