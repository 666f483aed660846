#!/usr/bin/env python
"""Script to run the task tracker API server."""
import uvicorn

from task_api import config

if __name__ == "__main__":
    uvicorn.run(
        "task_api.main:app",
        host=config.HOST,
        port=config.PORT,
        reload=config.RELOAD,
        log_level=config.LOG_LEVEL.lower(),
    )
