"""Run the game manual API with uvicorn."""

import os

import uvicorn


def main():
    reload = os.getenv("GAME_MANUAL_RELOAD", "").lower() in ("1", "true", "yes")
    uvicorn.run(
        "gamemanual.main:app",
        host=os.getenv("GAME_MANUAL_HOST", "0.0.0.0"),
        port=int(os.getenv("GAME_MANUAL_PORT", "8000")),
        reload=reload,
    )


if __name__ == "__main__":
    main()
