"""Render startup - imports the real app with error handling."""
import os
import sys
import traceback

port = int(os.environ.get("PORT", "10000"))
import_error = None

# Try to import the real app
try:
    from src.api.server import app
    print("[start.py] Real app imported successfully", flush=True)
except Exception as e:
    import_error = f"{type(e).__name__}: {e}\n{traceback.format_exc()}"
    print(f"[start.py] IMPORT FAILED: {import_error}", file=sys.stderr, flush=True)
    # Fallback to minimal app that reports the error on the health route
    from fastapi import FastAPI
    from fastapi.responses import JSONResponse
    app = FastAPI()
    err_msg = import_error  # capture in closure

    @app.get("/api/health")
    async def health():
        return JSONResponse(status_code=503, content={"status": "unhealthy", "error": err_msg})

    @app.post("/api/generate")
    async def generate():
        return JSONResponse(status_code=500, content={"error": f"API call failed: {err_msg}"})

import uvicorn
print(f"[start.py] Starting on port {port}", flush=True)
uvicorn.run(app, host="0.0.0.0", port=port, log_level="info")
