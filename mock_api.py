"""
ローカル開発用の外部メタデータAPIモック。

    python mock_api.py  # -> http://localhost:8081/info?group=...&song=...
"""
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

MOCK_API_PORT = 8081

SONG_DETAIL = {
    "releaseDate": "16.07.2006",
    "text": (
        "Ooh baby, don't you know I suffer?\nOoh baby, can you hear me moan?\n"
        "You caught me under false pretenses\nHow long before you let me go?\n\n"
        "Ooh\nYou set my soul alight\nOoh\nYou set my soul alight"
    ),
    "link": "https://www.youtube.com/watch?v=Xsp3_a-PMTw",
}

app = FastAPI(title="Music Info Mock API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/info")
def get_info(group: Optional[str] = None, song: Optional[str] = None):
    if not group or not song:
        return JSONResponse(status_code=400, content={"error": "group and song parameters are required"})
    return SONG_DETAIL


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=MOCK_API_PORT)
