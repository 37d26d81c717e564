import platform
import time
from typing import Any, Dict

from golfwager.config import get_settings
from golfwager.games.schemas import GameMode
from golfwager.metrics import BUILD_VERSION, GIT_SHA


async def health() -> Dict[str, Any]:
    settings = get_settings()
    return {
        "status": "ok",
        "version": BUILD_VERSION,
        "git": GIT_SHA,
        "ts": time.time(),
        "modes": [mode.value for mode in GameMode],
        "limits": {
            "maxPlayers": settings.max_players,
            "maxHoles": settings.max_holes,
        },
        "runtime": {
            "python": platform.python_version(),
        },
    }
