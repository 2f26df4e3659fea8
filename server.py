# server.py (repo root)
from app.main import app

# Optional local run:
if __name__ == "__main__":
    import uvicorn
    from app.config import config
    uvicorn.run(app, host="0.0.0.0", port=config.port)
