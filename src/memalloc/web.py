#!/usr/bin/env python3
"""웹 서버 진입점"""


def run_server(host="0.0.0.0", port=8000):
    """웹 서버 시작"""
    import uvicorn
    from .web_app.server import app

    print("Starting memalloc Web Server...")
    print(f"Open http://localhost:{port} in your browser")
    uvicorn.run(app, host=host, port=port)
