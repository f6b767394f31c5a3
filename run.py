"""Server run script."""

import uvicorn
from tft_tooltip.api.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "tft_tooltip.api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
