#!/usr/bin/env python3
"""
Main entry point for the watsonx-gateway server.
"""

import uvicorn
from dotenv import load_dotenv

# Load environment variables before settings are read
load_dotenv()

from watsonx_gateway.core import get_settings  # noqa: E402
from watsonx_gateway.main import create_app  # noqa: E402

if __name__ == "__main__":
    settings = get_settings()
    host = settings.server.host
    port = settings.server.port

    print(f"Starting watsonx-gateway on {host}:{port}")
    if settings.debug:
        print(f"API documentation available at http://{host}:{port}/docs")

    app = create_app()
    uvicorn.run(app, host=host, port=port, log_level=settings.logging.level.lower(), access_log=False)
